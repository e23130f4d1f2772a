from datetime import date

import pytest

from api.backend import TaskManagerBackend
from storage.repository import InMemoryRepository, RecordNotFoundError
from taskmind.models import (
    CategoryDraft,
    ContextDraft,
    ContextEntry,
    TaskDraft,
    TaskFilter,
    TaskSort,
    TaskUpdate,
)


def _draft(title="Task", **kw):
    return TaskDraft(title=title, deadline=kw.pop("deadline", date(2024, 1, 10)), **kw)


def test_create_plain_task(backend):
    task = backend.create_task(_draft("Water plants"))
    assert task.ai_enhanced is False
    assert task.context_based is False
    assert backend.list_tasks() == [task]


def test_create_with_applied_suggestion(backend):
    backend.create_context_entry(ContextDraft(content="Budget review went great", source_type="email"))

    suggestion = backend.analyze_task("Urgent budget sync", "with finance")
    assert suggestion.priority_score == 5
    assert suggestion.suggested_deadline == date(2024, 1, 2)

    task = backend.create_task(_draft("Urgent budget sync", description="with finance"), suggestion)
    assert task.ai_enhanced is True
    assert task.context_based is True
    assert task.priority_score == 5
    assert task.deadline == date(2024, 1, 2)
    assert task.category == "General"
    assert "Related to recent discussions about Budget" in task.description


def test_analyze_uses_newest_context_first(backend):
    for i in range(5):
        backend.create_context_entry(ContextDraft(content=f"entry filler{i}"))
    # the newest entry is inside the five-entry window even though it was added last
    backend.create_context_entry(ContextDraft(content="dentist appointment"))
    suggestion = backend.analyze_task("Call dentist")
    assert suggestion.priority_score == 4


def test_toggle(backend):
    task = backend.create_task(_draft())
    assert backend.toggle_task(task.id).status == "completed"
    assert backend.toggle_task(task.id).status == "pending"

    backend.update_task(task.id, TaskUpdate(status="in_progress"))
    assert backend.toggle_task(task.id).status == "completed"


def test_partial_update_keeps_other_fields(backend):
    task = backend.create_task(_draft("Old", category="Work", priority_score=2))
    updated = backend.update_task(task.id, TaskUpdate(title="New"))
    assert updated.title == "New"
    assert updated.category == "Work"
    assert updated.priority_score == 2


def test_missing_task_propagates(backend):
    with pytest.raises(RecordNotFoundError):
        backend.toggle_task("missing")


def test_delete(backend):
    task = backend.create_task(_draft())
    backend.delete_task(task.id)
    assert backend.list_tasks() == []


def test_list_tasks_filters_and_sorts(backend):
    backend.create_task(_draft("Low", priority_score=1, category="Home"))
    backend.create_task(_draft("High", priority_score=5, category="Work"))
    out = backend.list_tasks(TaskFilter(category="Work"), TaskSort(field="priority", order="desc"))
    assert [t.title for t in out] == ["High"]
    assert backend.task_categories() == ["Work", "Home"]


def test_context_entry_is_analyzed_and_visible_to_recommendations(ticking_clock, fake_provider_factory):
    provider = fake_provider_factory(recommendations=["Send recap"])
    backend = TaskManagerBackend(
        contexts=InMemoryRepository(ContextEntry, clock=ticking_clock),
        provider=provider,
        clock=lambda: date(2024, 1, 1),
    )
    entry, recs = backend.create_context_entry(
        ContextDraft(content="There was a problem with the delivery", source_type="whatsapp")
    )
    assert entry.sentiment == "negative"
    assert entry.keywords == ["There", "problem", "with", "delivery"]
    assert entry.processed_insights.startswith("Content analysis suggests negative sentiment.")
    assert recs == ["Send recap"]
    assert [e.id for e in provider.seen_entries[-1]] == [entry.id]


def test_failed_refresh_keeps_created_entry(backend):
    class Broken:
        def recommend(self, entries):
            raise ConnectionError("analyzer down")

    backend.recommender.provider = Broken()
    with pytest.raises(ConnectionError):
        backend.create_context_entry(ContextDraft(content="note"))
    assert len(backend.list_context()) == 1


def test_dashboard(backend):
    done = backend.create_task(_draft("Done", deadline=date(2023, 12, 1)))
    backend.toggle_task(done.id)
    backend.create_task(_draft("Late", deadline=date(2023, 12, 1)))
    backend.create_task(_draft("Future", deadline=date(2024, 2, 1)))

    stats = backend.dashboard()
    assert stats.total == 3
    assert stats.completed == 1
    assert stats.pending == 2
    assert stats.overdue == 1
    assert stats.completion_rate == 33
    assert [t.title for t in stats.recent] == ["Future", "Late", "Done"]


def test_dashboard_empty(backend):
    assert backend.dashboard().completion_rate == 0


def test_categories(backend):
    backend.create_category(CategoryDraft(name="Work", color="#f00"))
    assert [c.name for c in backend.list_categories()] == ["Work"]
