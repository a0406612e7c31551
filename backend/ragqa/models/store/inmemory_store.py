from __future__ import annotations
from typing import List, Sequence
import logging
import numpy as np
from ragqa.core.entities import Document, SearchHit
from ragqa.core.ports.vector_store import IVectorStore

logger = logging.getLogger("ragqa.store.memory")

class InMemoryVectorStore(IVectorStore):
    """
    Process-local cosine index (NumPy only).
    Same contract as the Qdrant store; contents vanish with the process.
    """
    def __init__(self, dim: int = 256) -> None:
        self.dim = dim
        self.docs: List[Document] = []
        self._mat = np.zeros((0, dim), dtype=np.float32)

    def check_connection(self) -> bool:
        return True

    def ensure_collection(self, dim: int) -> None:
        if dim != self.dim:
            logger.warning(f"⚠️ Vector size mismatch ({self.dim} != {dim}). Recreating in-memory collection.")
        self.dim = dim
        self.docs = []
        self._mat = np.zeros((0, dim), dtype=np.float32)

    def upsert(self, documents: Sequence[Document], vectors: Sequence[List[float]]) -> None:
        if not documents:
            return
        M = np.asarray(vectors, dtype=np.float32).reshape(len(documents), -1)
        if M.shape[1] != self.dim:
            raise ValueError(f"Vector size {M.shape[1]} != collection size {self.dim}")
        # L2-normalize upfront
        n = np.linalg.norm(M, axis=1, keepdims=True)
        n[n == 0] = 1.0
        by_id = {d.doc_id: i for i, d in enumerate(self.docs)}
        for doc, row in zip(documents, M / n):
            if doc.doc_id in by_id:
                self._mat[by_id[doc.doc_id]] = row
                self.docs[by_id[doc.doc_id]] = doc
            else:
                by_id[doc.doc_id] = len(self.docs)
                self.docs.append(doc)
                self._mat = np.vstack([self._mat, row[None, :]])

    def search(self, vector: List[float], limit: int = 3, score_threshold: float = 0.0) -> List[SearchHit]:
        if not self.docs:
            return []
        q = np.asarray(vector, dtype=np.float32)
        qn = q / (np.linalg.norm(q) or 1.0)
        sims = self._mat @ qn
        idx = np.argsort(-sims, kind="stable")[:limit]
        return [
            SearchHit(payload=self.docs[i].to_payload(), score=float(sims[i]))
            for i in idx
            if sims[i] >= score_threshold
        ]

    def count(self) -> int:
        return len(self.docs)
