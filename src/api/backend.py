import logging
from datetime import date
from typing import Callable, List, Optional, Tuple

from analysis.context_analyzer import ContextAnalyzer
from analysis.task_analyzer import TaskAnalyzer
from query.task_query import TaskQueryEngine
from recommendation.recommendation_engine import RecommendationEngine
from storage.repository import InMemoryRepository, Repository
from suggestions.providers.base import SuggestionProvider
from suggestions.providers.rule_based_provider import RuleBasedSuggestionProvider
from taskmind.models import (
    Category,
    CategoryDraft,
    ContextAnalysis,
    ContextAnalysisRequest,
    ContextDraft,
    ContextEntry,
    DashboardStats,
    Task,
    TaskAnalysisRequest,
    TaskDraft,
    TaskFilter,
    TaskSort,
    TaskSuggestion,
    TaskUpdate,
)

logger = logging.getLogger(__name__)

RECENT_TASKS = 5


class TaskManagerBackend:
    """Central orchestration component: ties the analyzers to the repositories.

    Repository errors are not caught here; they reach the caller unchanged.
    """

    def __init__(
        self,
        tasks: Optional[Repository[Task]] = None,
        contexts: Optional[Repository[ContextEntry]] = None,
        categories: Optional[Repository[Category]] = None,
        provider: Optional[SuggestionProvider] = None,
        clock: Callable[[], date] = date.today,
    ):
        self.tasks = tasks if tasks is not None else InMemoryRepository(Task)
        self.contexts = contexts if contexts is not None else InMemoryRepository(ContextEntry)
        self.categories = (
            categories
            if categories is not None
            else InMemoryRepository(Category, order_by="usage_count")
        )
        self.clock = clock

        provider = provider or RuleBasedSuggestionProvider()
        self.task_analyzer = TaskAnalyzer()
        self.context_analyzer = ContextAnalyzer(provider=provider)
        self.recommender = RecommendationEngine(provider=provider)
        self.query_engine = TaskQueryEngine()

    # --- tasks ---

    def list_tasks(
        self,
        task_filter: Optional[TaskFilter] = None,
        sort: Optional[TaskSort] = None,
    ) -> List[Task]:
        return self.query_engine.query(self.tasks.list(), task_filter, sort)

    def analyze_task(self, title: str, description: str = "") -> TaskSuggestion:
        """Runs the task heuristics against the stored context, newest first."""
        request = TaskAnalysisRequest(
            title=title,
            description=description,
            recent_context=tuple(self.contexts.list()),
            today=self.clock(),
        )
        return self.task_analyzer.analyze(request)

    def create_task(self, draft: TaskDraft, suggestion: Optional[TaskSuggestion] = None) -> Task:
        fields = draft.model_dump()
        if suggestion is not None:
            fields.update(
                description=suggestion.enhanced_description,
                category=suggestion.suggested_category,
                deadline=suggestion.suggested_deadline,
                priority_score=suggestion.priority_score,
            )
        fields["ai_enhanced"] = suggestion is not None
        fields["context_based"] = len(self.contexts.list()) > 0

        task = self.tasks.insert(fields)
        logger.info(f"Task created: {task.title!r} (ai_enhanced={task.ai_enhanced})")
        return task

    def update_task(self, task_id: str, update: TaskUpdate) -> Task:
        return self.tasks.update(task_id, update.model_dump(exclude_unset=True, exclude_none=True))

    def toggle_task(self, task_id: str) -> Task:
        task = self.tasks.get(task_id)
        new_status = "pending" if task.status == "completed" else "completed"
        return self.tasks.update(task_id, {"status": new_status})

    def delete_task(self, task_id: str) -> None:
        self.tasks.delete(task_id)

    def task_categories(self) -> List[str]:
        return list(dict.fromkeys(t.category for t in self.tasks.list()))

    def dashboard(self, today: Optional[date] = None) -> DashboardStats:
        today = today or self.clock()
        tasks = self.tasks.list()
        total = len(tasks)
        completed = sum(1 for t in tasks if t.status == "completed")

        return DashboardStats(
            total=total,
            completed=completed,
            pending=sum(1 for t in tasks if t.status == "pending"),
            in_progress=sum(1 for t in tasks if t.status == "in_progress"),
            overdue=sum(1 for t in tasks if t.is_overdue(today)),
            ai_enhanced=sum(1 for t in tasks if t.ai_enhanced),
            context_entries=len(self.contexts.list()),
            completion_rate=round(completed / total * 100) if total else 0,
            recent=tasks[:RECENT_TASKS],
        )

    # --- context ---

    def list_context(self) -> List[ContextEntry]:
        return self.contexts.list()

    def analyze_context(self, content: str) -> ContextAnalysis:
        return self.context_analyzer.analyze(ContextAnalysisRequest(content=content))

    def recommendations(self) -> List[str]:
        return self.recommender.recommend(self.contexts.list())

    def create_context_entry(self, draft: ContextDraft) -> Tuple[ContextEntry, List[str]]:
        """Store a note, then recompute recommendations from the fresh list.

        Keywords, sentiment and insights always come from analyzing the
        stored content. A failing refresh leaves the stored entry in place.
        """
        analysis = self.analyze_context(draft.content)

        entry = self.contexts.insert(
            {
                **draft.model_dump(),
                "processed_insights": analysis.insights,
                "keywords": analysis.keywords,
                "sentiment": analysis.sentiment,
            }
        )
        logger.info(f"Context entry stored: {entry.id} ({entry.source_type}, {entry.sentiment})")
        return entry, self.recommendations()

    # --- categories ---

    def list_categories(self) -> List[Category]:
        return self.categories.list()

    def create_category(self, draft: CategoryDraft) -> Category:
        return self.categories.insert(draft.model_dump())
