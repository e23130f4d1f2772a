from __future__ import annotations

from typing import Protocol, Sequence

from taskmind.models import ContextEntry


class SuggestionProvider(Protocol):
    """Strategy behind the canned parts of context analysis and recommendations.

    Analyzers hold a provider and delegate to it, so a remote or model-backed
    implementation can be swapped in without touching callers.
    """

    def task_suggestions(self, content: str) -> list[str]:
        """Follow-up task titles for a single context note."""
        ...

    def recommend(self, entries: Sequence[ContextEntry]) -> list[str]:
        """Ordered task titles derived from all stored context entries."""
        ...
