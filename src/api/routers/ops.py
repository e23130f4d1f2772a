import os
import logging

from fastapi import APIRouter, Depends, Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from api.backend import TaskManagerBackend
from api.dependencies import get_backend
from api.metrics import TASKS_TOTAL
from heuristics.text_heuristics import DEFAULT_LEXICONS

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(backend: TaskManagerBackend = Depends(get_backend)) -> dict:
    """Health check endpoint for container orchestration."""
    health = {
        "status": "healthy",
        "profile": os.getenv("DEPLOYMENT_PROFILE", "unknown"),
        "provider": type(backend.context_analyzer.provider).__name__,
    }

    try:
        health["tasks"] = len(backend.tasks.list())
        health["context_entries"] = len(backend.contexts.list())
    except Exception as e:
        logger.error(f"Repository health check failed: {e}")
        health["status"] = "degraded"
        health["error"] = str(e)

    return health


@router.get("/lexicons")
async def lexicons() -> dict:
    """Word lists the heuristics match against (read-only)."""
    return DEFAULT_LEXICONS.as_dict()


@router.get("/metrics")
async def metrics(backend: TaskManagerBackend = Depends(get_backend)) -> Response:
    """
    Prometheus scrape endpoint.
    """
    try:
        TASKS_TOTAL.set(len(backend.tasks.list()))
    except Exception:
        pass

    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
