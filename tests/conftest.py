"""Shared pytest fixtures and test doubles for the RAG QA service."""
from __future__ import annotations

import uuid
from typing import List

import pytest

from ragqa.config import Settings
from ragqa.core.entities import Document, SearchHit
from ragqa.core.ports.embeddings import IEmbeddingModel, QUERY
from ragqa.core.ports.generator import IAnswerGenerator
from ragqa.core.ports.vector_store import IVectorStore


# -- Test doubles --

class FakeEmbedder(IEmbeddingModel):
    """Returns a constant vector and records every call."""

    def __init__(self, dim: int = 4, error: Exception | None = None):
        self.dim = dim
        self.error = error
        self.calls: List[tuple] = []

    def embed(self, text, role=QUERY):
        self.calls.append((text, role))
        if self.error:
            raise self.error
        return [1.0] + [0.0] * (self.dim - 1)


class FakeStore(IVectorStore):
    """Serves canned hits regardless of the query vector."""

    def __init__(self, hits: List[SearchHit] | None = None, reachable: bool = True):
        self.hits = hits or []
        self.reachable = reachable
        self.searches: List[tuple] = []

    def check_connection(self):
        return self.reachable

    def search(self, vector, limit=3, score_threshold=0.0):
        self.searches.append((list(vector), limit, score_threshold))
        return self.hits[:limit]

    def ensure_collection(self, dim):
        pass

    def upsert(self, documents, vectors):
        pass

    def count(self):
        return len(self.hits)


class FakeGenerator(IAnswerGenerator):
    def __init__(self, answer: str = "Paris.", error: Exception | None = None):
        self.answer = answer
        self.error = error
        self.calls: List[tuple] = []

    def generate(self, question, context):
        self.calls.append((question, context))
        if self.error:
            raise self.error
        return self.answer


def make_hit(text="some text", title="A", author="B", date="2024-01-01", score=0.5) -> SearchHit:
    return SearchHit(
        payload={"text": text, "title": title, "author": author, "date": date,
                 "category": "Misc", "tags": [], "source": "a.json"},
        score=score,
    )


def make_doc(text: str, **kw) -> Document:
    return Document(doc_id=str(uuid.uuid4()), text=text, **kw)


# -- Fixtures --

@pytest.fixture
def settings():
    return Settings(hf_api_key="hf_test", vector_backend="memory", vector_size=256)


@pytest.fixture
def fake_embedder():
    return FakeEmbedder()


@pytest.fixture
def fake_generator():
    return FakeGenerator()
