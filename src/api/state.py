import os
from typing import Optional

from api.backend import TaskManagerBackend
from storage.json_repository import JsonFileRepository
from storage.repository import InMemoryRepository
from suggestions.registry import build_provider
from taskmind.models import Category, ContextEntry, Task

# Where JSON files live; in-memory repositories when unset
DATA_DIR = os.getenv("TASKMIND_DATA_DIR", "").strip()

# Global instance initialized on first use
backend: Optional[TaskManagerBackend] = None


def build_backend(data_dir: str = DATA_DIR) -> TaskManagerBackend:
    if data_dir:
        tasks = JsonFileRepository(Task, f"{data_dir}/tasks.json")
        contexts = JsonFileRepository(ContextEntry, f"{data_dir}/context_entries.json")
        categories = JsonFileRepository(
            Category, f"{data_dir}/categories.json", order_by="usage_count"
        )
    else:
        tasks = InMemoryRepository(Task)
        contexts = InMemoryRepository(ContextEntry)
        categories = InMemoryRepository(Category, order_by="usage_count")

    return TaskManagerBackend(
        tasks=tasks,
        contexts=contexts,
        categories=categories,
        provider=build_provider(),
    )
