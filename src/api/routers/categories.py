import asyncio

from fastapi import APIRouter, Depends

from api.backend import TaskManagerBackend
from api.dependencies import get_backend
from taskmind.models import CategoryDraft

router = APIRouter()


@router.get("/categories")
async def list_categories(backend: TaskManagerBackend = Depends(get_backend)) -> dict:
    """Categories, most used first."""
    categories = await asyncio.to_thread(backend.list_categories)
    return {"categories": [c.model_dump(mode="json") for c in categories]}


@router.post("/categories", status_code=201)
async def create_category(
    payload: CategoryDraft,
    backend: TaskManagerBackend = Depends(get_backend),
) -> dict:
    category = await asyncio.to_thread(backend.create_category, payload)
    return {"status": "created", "category": category.model_dump(mode="json")}
