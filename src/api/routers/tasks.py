import asyncio
import logging
import time
from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from api.backend import TaskManagerBackend
from api.dependencies import get_analysis_latency, get_backend
from api.metrics import ANALYSES_TOTAL, REQUESTS_TOTAL, REQUEST_LATENCY_SECONDS, TASKS_TOTAL
from storage.repository import RecordNotFoundError
from taskmind.models import (
    SortField,
    SortOrder,
    TaskDraft,
    TaskFilter,
    TaskSort,
    TaskSuggestion,
    TaskUpdate,
    priority_label,
)

router = APIRouter()
logger = logging.getLogger(__name__)


class TaskAnalyzeIn(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = ""


class TaskCreateIn(TaskDraft):
    # present when the user applied the analyzer's suggestion before saving
    suggestion: Optional[TaskSuggestion] = None


def _observe(endpoint: str, status: str, start: float) -> None:
    try:
        REQUESTS_TOTAL.labels(endpoint=endpoint, status=status).inc()
        REQUEST_LATENCY_SECONDS.labels(endpoint=endpoint).observe(time.time() - start)
    except Exception:
        pass


def _serialize(task) -> dict:
    data = task.model_dump(mode="json")
    data["priority_label"] = priority_label(task.priority_score)
    return data


@router.get("/tasks")
async def list_tasks(
    search: str = "",
    status: Literal["all", "pending", "in_progress", "completed"] = "all",
    category: str = "all",
    sort_by: SortField = "priority",
    order: SortOrder = "desc",
    backend: TaskManagerBackend = Depends(get_backend),
) -> dict:
    """Filtered and sorted task list, recomputed on every call."""
    start = time.time()
    tasks = await asyncio.to_thread(
        backend.list_tasks,
        TaskFilter(search_term=search, status=status, category=category),
        TaskSort(field=sort_by, order=order),
    )
    _observe("/tasks", "ok", start)
    return {"tasks": [_serialize(t) for t in tasks], "total": len(tasks)}


@router.get("/tasks/categories")
async def task_categories(backend: TaskManagerBackend = Depends(get_backend)) -> dict:
    return {"categories": await asyncio.to_thread(backend.task_categories)}


@router.post("/tasks/analyze")
async def analyze_task(
    payload: TaskAnalyzeIn,
    backend: TaskManagerBackend = Depends(get_backend),
    latency_s: float = Depends(get_analysis_latency),
) -> dict:
    start = time.time()
    if latency_s > 0:
        await asyncio.sleep(latency_s)

    suggestion = await asyncio.to_thread(backend.analyze_task, payload.title, payload.description)
    try:
        ANALYSES_TOTAL.labels(kind="task").inc()
    except Exception:
        pass
    _observe("/tasks/analyze", "ok", start)
    return suggestion.model_dump(mode="json")


@router.post("/tasks", status_code=201)
async def create_task(
    payload: TaskCreateIn,
    backend: TaskManagerBackend = Depends(get_backend),
) -> dict:
    start = time.time()
    draft = TaskDraft(**payload.model_dump(exclude={"suggestion"}))
    task = await asyncio.to_thread(backend.create_task, draft, payload.suggestion)
    _observe("/tasks", "created", start)
    try:
        TASKS_TOTAL.set(len(backend.tasks.list()))
    except Exception:
        pass
    return {"status": "created", "task": _serialize(task)}


@router.patch("/tasks/{task_id}")
async def update_task(
    task_id: str,
    payload: TaskUpdate,
    backend: TaskManagerBackend = Depends(get_backend),
) -> dict:
    try:
        task = await asyncio.to_thread(backend.update_task, task_id, payload)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"status": "updated", "task": _serialize(task)}


@router.post("/tasks/{task_id}/toggle")
async def toggle_task(
    task_id: str,
    backend: TaskManagerBackend = Depends(get_backend),
) -> dict:
    try:
        task = await asyncio.to_thread(backend.toggle_task, task_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    logger.info(f"Task {task_id} toggled to {task.status}")
    return {"status": "updated", "task": _serialize(task)}


@router.delete("/tasks/{task_id}")
async def delete_task(
    task_id: str,
    backend: TaskManagerBackend = Depends(get_backend),
) -> dict:
    try:
        await asyncio.to_thread(backend.delete_task, task_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    try:
        TASKS_TOTAL.set(len(backend.tasks.list()))
    except Exception:
        pass
    return {"status": "deleted"}


@router.get("/dashboard")
async def dashboard(backend: TaskManagerBackend = Depends(get_backend)) -> dict:
    """Overview counters plus the most recent tasks."""
    stats = await asyncio.to_thread(backend.dashboard)
    data = stats.model_dump(mode="json", exclude={"recent"})
    data["recent"] = [_serialize(t) for t in stats.recent]
    return data
