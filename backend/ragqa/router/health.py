# backend/ragqa/router/health.py
from __future__ import annotations
import logging
from fastapi import APIRouter, Depends

from ragqa.container import AppContainer
from ragqa.models.schemas import HealthResponse
from ragqa.router.deps import get_container

router = APIRouter(tags=["health"])
logger = logging.getLogger("ragqa.router.health")


@router.get("/health", response_model=HealthResponse)
def health_check(container: AppContainer = Depends(get_container)):
    """Liveness plus vector store reachability."""
    reachable = container.store.check_connection()
    points = None
    if reachable:
        try:
            points = container.store.count()
        except Exception as e:
            logger.warning(f"⚠️ Could not count points: {e}")
    return HealthResponse(status="ok" if reachable else "degraded", vector_store=reachable, points=points)
