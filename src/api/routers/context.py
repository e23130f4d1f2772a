import asyncio
import logging
import time

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.backend import TaskManagerBackend
from api.dependencies import get_analysis_latency, get_backend
from api.metrics import ANALYSES_TOTAL, REQUESTS_TOTAL, REQUEST_LATENCY_SECONDS
from taskmind.models import ContextDraft

router = APIRouter()
logger = logging.getLogger(__name__)


class ContextAnalyzeIn(BaseModel):
    content: str = ""


@router.get("/context")
async def list_context(backend: TaskManagerBackend = Depends(get_backend)) -> dict:
    entries = await asyncio.to_thread(backend.list_context)
    return {
        "entries": [e.model_dump(mode="json") for e in entries],
        "total": len(entries),
    }


@router.post("/context/analyze")
async def analyze_context(
    payload: ContextAnalyzeIn,
    backend: TaskManagerBackend = Depends(get_backend),
    latency_s: float = Depends(get_analysis_latency),
) -> dict:
    start = time.time()
    if latency_s > 0:
        await asyncio.sleep(latency_s)

    analysis = await asyncio.to_thread(backend.analyze_context, payload.content)
    try:
        ANALYSES_TOTAL.labels(kind="context").inc()
        REQUESTS_TOTAL.labels(endpoint="/context/analyze", status="ok").inc()
        REQUEST_LATENCY_SECONDS.labels(endpoint="/context/analyze").observe(time.time() - start)
    except Exception:
        pass
    return analysis.model_dump(mode="json")


@router.get("/context/recommendations")
async def recommendations(
    backend: TaskManagerBackend = Depends(get_backend),
    latency_s: float = Depends(get_analysis_latency),
) -> dict:
    if latency_s > 0:
        await asyncio.sleep(latency_s)
    return {"recommendations": await asyncio.to_thread(backend.recommendations)}


@router.post("/context", status_code=201)
async def create_context(
    payload: ContextDraft,
    backend: TaskManagerBackend = Depends(get_backend),
) -> dict:
    """
    Store a context note and return recommendations computed after the insert.

    The note is analyzed here; client-side analysis results are not trusted.
    """
    start = time.time()
    entry, recs = await asyncio.to_thread(backend.create_context_entry, payload)
    try:
        ANALYSES_TOTAL.labels(kind="recommendation").inc()
        REQUESTS_TOTAL.labels(endpoint="/context", status="created").inc()
        REQUEST_LATENCY_SECONDS.labels(endpoint="/context").observe(time.time() - start)
    except Exception:
        pass
    return {
        "status": "created",
        "entry": entry.model_dump(mode="json"),
        "recommendations": recs,
    }
