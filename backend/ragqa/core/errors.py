from __future__ import annotations


class RAGError(Exception):
    """Base error for the question-answering pipeline."""


class ConfigurationError(RAGError):
    pass


class EmbeddingError(RAGError):
    pass


class GenerationError(RAGError):
    pass


class VectorStoreError(RAGError):
    pass
