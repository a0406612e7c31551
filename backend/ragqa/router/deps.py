# backend/ragqa/router/deps.py
from __future__ import annotations
from fastapi import HTTPException, Request, status

from ragqa.container import AppContainer
from ragqa.core.services.qa_service import RAGService


def get_container(request: Request) -> AppContainer:
    """FastAPI dependency returning the container built at startup."""
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Service not ready")
    return container


def get_rag_service(request: Request) -> RAGService:
    return get_container(request).rag_service
