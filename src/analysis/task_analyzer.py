from __future__ import annotations

import logging
from datetime import timedelta
from typing import Sequence

from heuristics.text_heuristics import DEFAULT_LEXICONS, Lexicons, contains_any
from taskmind.models import ContextEntry, TaskAnalysisRequest, TaskSuggestion

logger = logging.getLogger(__name__)

BASE_PRIORITY = 3
MAX_PRIORITY = 5
CONTEXT_WINDOW = 5

DEFAULT_CATEGORY = "General"
WORK_CATEGORY = "Work"
PERSONAL_CATEGORY = "Personal"


def _bump(priority: int, by: int) -> int:
    return min(priority + by, MAX_PRIORITY)


def deadline_offset_days(priority_score: int) -> int:
    if priority_score >= 4:
        return 1
    if priority_score == 3:
        return 3
    return 7


def matched_context_keywords(text: str, recent_context: Sequence[ContextEntry]) -> list[str]:
    """Keywords of the newest entries that occur in ``text`` (already lower-cased).

    The keyword union keeps first-seen order.
    """
    seen: dict[str, None] = {}
    for entry in recent_context[:CONTEXT_WINDOW]:
        for keyword in entry.keywords:
            seen.setdefault(keyword, None)
    return [k for k in seen if k.lower() in text]


class TaskAnalyzer:
    """Priority, category and deadline suggestions for a task draft.

    Deterministic for a fixed ``request.today``; no store or network access.
    """

    def __init__(self, lexicons: Lexicons = DEFAULT_LEXICONS):
        self.lexicons = lexicons

    def analyze(self, request: TaskAnalysisRequest) -> TaskSuggestion:
        priority = BASE_PRIORITY
        category = DEFAULT_CATEGORY
        text = f"{request.title} {request.description}".lower()

        if contains_any(text, self.lexicons.urgency):
            priority = _bump(priority, 2)

        # work wins over personal
        if contains_any(text, self.lexicons.work):
            category = WORK_CATEGORY
            priority = _bump(priority, 1)
        elif contains_any(text, self.lexicons.personal):
            category = PERSONAL_CATEGORY

        matched = matched_context_keywords(text, request.recent_context)
        description = request.description
        if matched:
            priority = _bump(priority, 1)
            description += (
                "\n\nContext insights: Related to recent discussions about "
                + ", ".join(matched)
            )

        deadline = request.today + timedelta(days=deadline_offset_days(priority))
        reasoning = f"Priority based on content analysis ({priority}/5). " + (
            "Enhanced with context from recent entries."
            if matched
            else "No recent context available."
        )

        logger.debug(
            f"Task analyzed: priority={priority} category={category} context_matches={len(matched)}"
        )
        return TaskSuggestion(
            priority_score=priority,
            suggested_deadline=deadline,
            enhanced_description=description,
            suggested_category=category,
            reasoning=reasoning,
        )
