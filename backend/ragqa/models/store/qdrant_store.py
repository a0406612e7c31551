# backend/ragqa/models/store/qdrant_store.py

from __future__ import annotations
from typing import List, Sequence
import logging
from qdrant_client import QdrantClient
from qdrant_client.models import Distance, Filter, FilterSelector, PointStruct, VectorParams

from ragqa.core.entities import Document, SearchHit
from ragqa.core.errors import VectorStoreError
from ragqa.core.ports.vector_store import IVectorStore

logger = logging.getLogger("ragqa.store.qdrant")


class QdrantVectorStore(IVectorStore):
    """Qdrant-backed store over a single cosine collection."""

    def __init__(
        self,
        url: str = "http://vectordb:6333",
        collection: str = "corpus",
        timeout: int = 60,
        client: QdrantClient | None = None,
    ):
        self.client = client or QdrantClient(url=url, timeout=timeout)
        self.collection = collection

    def check_connection(self) -> bool:
        try:
            self.client.get_collections()
            logger.info("✅ Qdrant connected")
            return True
        except Exception as e:
            logger.error(f"❌ Qdrant error: {e}")
            return False

    def search(self, vector: List[float], limit: int = 3, score_threshold: float = 0.0) -> List[SearchHit]:
        try:
            res = self.client.query_points(
                collection_name=self.collection,
                query=list(vector),
                limit=limit,
                with_payload=True,
                score_threshold=score_threshold,
            )
        except Exception as e:
            logger.error(f"❌ Vector search error: {e}")
            raise VectorStoreError(f"Vector search failed: {e}") from e
        return [SearchHit(payload=dict(p.payload or {}), score=float(p.score)) for p in res.points]

    # ----------------------------------------------------------
    # Indexing side
    # ----------------------------------------------------------
    def _create(self, dim: int) -> None:
        self.client.create_collection(
            collection_name=self.collection,
            vectors_config=VectorParams(size=dim, distance=Distance.COSINE),
        )

    def ensure_collection(self, dim: int) -> None:
        """
        Leave an empty collection of vector size `dim` behind:
        create it if missing, recreate it on a size mismatch (drops all points),
        otherwise delete its existing points.
        """
        if not self.client.collection_exists(self.collection):
            logger.info(f"Creating collection '{self.collection}' (size={dim})")
            self._create(dim)
            return

        info = self.client.get_collection(self.collection)
        vectors = info.config.params.vectors
        current = getattr(vectors, "size", None)
        if current != dim:
            logger.warning(
                f"⚠️ Vector size mismatch ({current} != {dim}). "
                f"Recreating collection '{self.collection}'; all indexed points are lost."
            )
            self.client.delete_collection(self.collection)
            self._create(dim)
            return

        if info.points_count:
            logger.info(f"Deleting {info.points_count} existing points...")
            self.client.delete(
                collection_name=self.collection,
                points_selector=FilterSelector(filter=Filter()),
                wait=True,
            )

    def upsert(self, documents: Sequence[Document], vectors: Sequence[List[float]]) -> None:
        points = [
            PointStruct(id=doc.doc_id, vector=list(vec), payload=doc.to_payload())
            for doc, vec in zip(documents, vectors)
        ]
        self.client.upsert(collection_name=self.collection, points=points, wait=True)

    def count(self) -> int:
        return self.client.count(collection_name=self.collection, exact=True).count
