from __future__ import annotations

from typing import Callable, Iterable, Optional

from taskmind.models import Task, TaskFilter, TaskSort

SORT_KEYS: dict[str, Callable[[Task], object]] = {
    "priority": lambda t: t.priority_score,
    "deadline": lambda t: t.deadline,
    "created": lambda t: t.created_at,
}


def matches(task: Task, task_filter: TaskFilter) -> bool:
    term = task_filter.search_term.lower()
    matches_search = (
        not term
        or term in task.title.lower()
        or term in task.description.lower()
    )
    matches_status = task_filter.status == "all" or task.status == task_filter.status
    matches_category = task_filter.category == "all" or task.category == task_filter.category
    return matches_search and matches_status and matches_category


class TaskQueryEngine:
    """Filter and stably sort tasks for display.

    ``sorted`` is stable in both directions, so tasks that tie on the sort
    key keep their filtered order even for ``desc``.
    """

    def query(
        self,
        tasks: Iterable[Task],
        task_filter: Optional[TaskFilter] = None,
        sort: Optional[TaskSort] = None,
    ) -> list[Task]:
        task_filter = task_filter or TaskFilter()
        sort = sort or TaskSort()

        kept = [t for t in tasks if matches(t, task_filter)]
        return sorted(kept, key=SORT_KEYS[sort.field], reverse=sort.order == "desc")
