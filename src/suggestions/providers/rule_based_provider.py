from __future__ import annotations

from typing import Sequence

from taskmind.models import ContextEntry

TASK_SUGGESTION_POOL: tuple[str, ...] = (
    "Follow up on mentioned topics",
    "Schedule related meetings",
    "Prepare necessary documents",
    "Review and respond to requests",
)

RECOMMENDATION_POOL: tuple[str, ...] = (
    "Schedule weekly team meeting",
    "Prepare quarterly report",
    "Follow up on client feedback",
    "Update project documentation",
    "Review and approve budget proposals",
)


class RuleBasedSuggestionProvider:
    """Default provider: fixed pools, the input is not consulted."""

    def __init__(self, suggestion_count: int = 2, recommendation_count: int = 3):
        self.suggestion_count = suggestion_count
        self.recommendation_count = recommendation_count

    def task_suggestions(self, content: str) -> list[str]:
        return list(TASK_SUGGESTION_POOL[: self.suggestion_count])

    def recommend(self, entries: Sequence[ContextEntry]) -> list[str]:
        return list(RECOMMENDATION_POOL[: self.recommendation_count])
