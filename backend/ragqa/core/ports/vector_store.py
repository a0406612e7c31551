from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Sequence
from ragqa.core.entities import Document, SearchHit

class IVectorStore(ABC):
    @abstractmethod
    def check_connection(self) -> bool:
        """Liveness probe; must return False instead of raising."""
        ...

    @abstractmethod
    def search(self, vector: List[float], limit: int = 3, score_threshold: float = 0.0) -> List[SearchHit]:
        """Return up to `limit` hits with score >= threshold, best first."""
        ...

    @abstractmethod
    def ensure_collection(self, dim: int) -> None: ...
    @abstractmethod
    def upsert(self, documents: Sequence[Document], vectors: Sequence[List[float]]) -> None: ...
    @abstractmethod
    def count(self) -> int: ...
