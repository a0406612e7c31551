# backend/ragqa/models/embedding/hf_embedding.py
from __future__ import annotations
from typing import List
import logging
import numpy as np
import requests

from ragqa.core.errors import EmbeddingError
from ragqa.core.ports.embeddings import IEmbeddingModel, QUERY

logger = logging.getLogger("ragqa.embedding.hf")


def mean_pool(raw) -> List[float]:
    """Reduce a feature-extraction response to one vector (row mean for 2-D output)."""
    arr = np.asarray(raw, dtype=float)
    if arr.ndim == 1:
        return arr.tolist()
    if arr.ndim == 2 and arr.shape[0] > 0:
        return arr.mean(axis=0).tolist()
    raise EmbeddingError(f"Unexpected feature-extraction shape: {arr.shape}")


class HFEmbedding(IEmbeddingModel):
    """
    Remote embedding through the Hugging Face feature-extraction endpoint.
    Inputs are prefixed with their role ("passage: " / "query: ") for
    asymmetric embedding models. Errors are raised, never retried.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "sentence-transformers/all-MiniLM-L6-v2",
        endpoint: str = "https://router.huggingface.co/hf-inference/models",
        dim: int = 256,
        timeout: float = 60.0,
        session: requests.Session | None = None,
    ):
        self.api_key = api_key
        self.model = model.strip()
        self.url = f"{endpoint.rstrip('/')}/{self.model}"
        self.dim = dim
        self.timeout = timeout
        self.http = session or requests.Session()

    def embed(self, text: str, role: str = QUERY) -> List[float]:
        payload = {"inputs": f"{role}: {text}"}
        headers = {"Authorization": f"Bearer {self.api_key}"}
        try:
            r = self.http.post(self.url, json=payload, headers=headers, timeout=self.timeout)
            r.raise_for_status()
            data = r.json()
        except requests.RequestException as e:
            logger.error(f"❌ Embedding request to {self.url} failed: {e}")
            raise EmbeddingError(f"Embedding request failed: {e}") from e
        except ValueError as e:
            raise EmbeddingError(f"Invalid JSON from embedding endpoint: {e}") from e

        vec = mean_pool(data)
        if len(vec) != self.dim:
            raise EmbeddingError(
                f"Embedding size {len(vec)} from '{self.model}' does not match configured vector size {self.dim}"
            )
        return vec
