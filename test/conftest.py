from datetime import date, datetime, timedelta, timezone

import pytest

from api.backend import TaskManagerBackend
from storage.repository import InMemoryRepository
from taskmind.models import Category, ContextEntry, Task

TODAY = date(2024, 1, 1)


class FakeProvider:
    def __init__(self, suggestions=None, recommendations=None):
        self._suggestions = suggestions or ["Call back"]
        self._recommendations = recommendations or ["Plan sprint"]
        self.seen_entries = []

    def task_suggestions(self, content: str) -> list:
        return list(self._suggestions)

    def recommend(self, entries) -> list:
        self.seen_entries.append(list(entries))
        return list(self._recommendations)


class TickingClock:
    """Returns a strictly increasing UTC timestamp on every call."""

    def __init__(self, start=datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        self.now = self.now + timedelta(minutes=1)
        return self.now


@pytest.fixture
def fake_provider_factory():
    def _make(suggestions=None, recommendations=None):
        return FakeProvider(suggestions, recommendations)
    return _make


@pytest.fixture
def ticking_clock():
    return TickingClock()


@pytest.fixture
def backend(ticking_clock):
    return TaskManagerBackend(
        tasks=InMemoryRepository(Task, clock=ticking_clock),
        contexts=InMemoryRepository(ContextEntry, clock=ticking_clock),
        categories=InMemoryRepository(Category, order_by="usage_count", clock=ticking_clock),
        clock=lambda: TODAY,
    )
