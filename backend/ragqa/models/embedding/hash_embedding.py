from __future__ import annotations
from typing import List
import math, re
from ragqa.core.ports.embeddings import IEmbeddingModel, QUERY

_TOKEN_SPLIT = re.compile(r"[^a-z0-9]+")


def _to_int32(x: int) -> int:
    x &= 0xFFFFFFFF
    return x - 0x100000000 if x & 0x80000000 else x


def hash_token(token: str) -> int:
    """djb2 (h * 33 + c) over signed 32-bit arithmetic, absolute value.

    Every step wraps, so long tokens hash differently than the JS
    `(h << 5) + h + c` form; vectors are not compatible with a JS-built index.
    """
    h = 5381
    for ch in token:
        h = _to_int32(h * 33 + ord(ch))
    return abs(h)


def tokenize(text: str) -> List[str]:
    return [t for t in _TOKEN_SPLIT.split(text.lower()) if t]


class HashEmbedding(IEmbeddingModel):
    """
    Deterministic bag-of-hashed-tokens embedding for offline / local mode.
    Each token bumps bin `hash(token) % dim`; the result is L2-normalized.
    Colliding tokens share a bin.
    """

    def __init__(self, dim: int = 256):
        if dim <= 0:
            raise ValueError(f"Invalid embedding dim: {dim}")
        self.dim = dim

    def _hash_vec(self, text: str) -> List[float]:
        vec = [0.0] * self.dim
        for token in tokenize(text):
            vec[hash_token(token) % self.dim] += 1.0

        norm = math.sqrt(sum(v * v for v in vec)) or 1.0
        return [v / norm for v in vec]

    def embed(self, text: str, role: str = QUERY) -> List[float]:
        # role prefixes only matter for asymmetric remote models
        return self._hash_vec(text or "")
