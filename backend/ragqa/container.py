from __future__ import annotations
import logging
from dataclasses import dataclass

from ragqa.config import Settings
from ragqa.core.ports.embeddings import IEmbeddingModel
from ragqa.core.ports.generator import IAnswerGenerator
from ragqa.core.ports.vector_store import IVectorStore
from ragqa.core.services.indexing_service import IndexingService
from ragqa.core.services.qa_service import RAGService
from ragqa.models.embedding.hash_embedding import HashEmbedding
from ragqa.models.embedding.hf_embedding import HFEmbedding
from ragqa.models.llm.extractive_generator import ExtractiveAnswerGenerator
from ragqa.models.llm.hf_generator import HFAnswerGenerator
from ragqa.models.store.inmemory_store import InMemoryVectorStore

logger = logging.getLogger("ragqa.container")

@dataclass
class AppContainer:
    settings: Settings
    store: IVectorStore
    embedder: IEmbeddingModel
    generator: IAnswerGenerator
    rag_service: RAGService
    indexing_service: IndexingService


def get_embedder(settings: Settings) -> IEmbeddingModel:
    """Local hashing embedder unless USE_HF_EMBEDDINGS is set."""
    if settings.use_hf_embeddings:
        logger.info(f"🔌 Using HF embedding: model={settings.hf_embedding_model}")
        return HFEmbedding(
            api_key=settings.hf_api_key,
            model=settings.hf_embedding_model,
            endpoint=settings.hf_embedding_endpoint,
            dim=settings.vector_size,
            timeout=settings.request_timeout,
        )
    logger.info(f"🔌 Using hash embedding: dim={settings.vector_size}")
    return HashEmbedding(dim=settings.vector_size)


def get_generator(settings: Settings) -> IAnswerGenerator:
    if settings.use_hf_chat:
        logger.info(f"🔌 Using HF generation: model={settings.hf_chat_model}")
        return HFAnswerGenerator(
            api_key=settings.hf_api_key,
            model=settings.hf_chat_model,
            endpoint=settings.hf_chat_endpoint,
            timeout=settings.request_timeout,
        )
    logger.info("🔌 Using extractive fallback generator")
    return ExtractiveAnswerGenerator()


def get_store(settings: Settings) -> IVectorStore:
    if settings.vector_backend == "memory":
        logger.info("📊 Using in-memory vector store")
        return InMemoryVectorStore(dim=settings.vector_size)
    # qdrant_client is only imported when the Qdrant backend is selected
    from ragqa.models.store.qdrant_store import QdrantVectorStore
    logger.info(f"🔗 Using Qdrant at {settings.qdrant_url}, collection={settings.qdrant_collection}")
    return QdrantVectorStore(
        url=settings.qdrant_url,
        collection=settings.qdrant_collection,
        timeout=settings.request_timeout,
    )


def build_container(
    settings: Settings,
    store: IVectorStore | None = None,
    embedder: IEmbeddingModel | None = None,
    generator: IAnswerGenerator | None = None,
) -> AppContainer:
    """Wire the pipeline; any component may be injected (tests, offline runs)."""
    store = store or get_store(settings)
    embedder = embedder or get_embedder(settings)
    generator = generator or get_generator(settings)

    rag_service = RAGService(embedder=embedder, store=store, generator=generator)
    indexing_service = IndexingService(
        store=store,
        embedder=embedder,
        dim=settings.vector_size,
        collection=settings.qdrant_collection,
    )
    logger.info("✅ Container built")
    return AppContainer(
        settings=settings,
        store=store,
        embedder=embedder,
        generator=generator,
        rag_service=rag_service,
        indexing_service=indexing_service,
    )
