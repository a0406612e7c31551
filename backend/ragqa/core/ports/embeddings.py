from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List

PASSAGE = "passage"
QUERY = "query"

class IEmbeddingModel(ABC):
    dim: int

    @abstractmethod
    def embed(self, text: str, role: str = QUERY) -> List[float]:
        ...

    def embed_batch(self, texts: List[str], role: str = PASSAGE) -> List[List[float]]:
        return [self.embed(t, role=role) for t in texts]
