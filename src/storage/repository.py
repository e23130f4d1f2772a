"""
Repository collaborator used by the backend for tasks, context entries and
categories.

Rows are pydantic models. ``insert`` assigns ``id`` and timestamps; ``list``
returns rows ordered by the repository's sort key, newest/largest first.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, List, Protocol, Type, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

Row = TypeVar("Row", bound=BaseModel)


class RepositoryError(Exception):
    """Backing store could not be read or written."""


class RecordNotFoundError(RepositoryError, KeyError):
    def __init__(self, entity: str, record_id: str):
        super().__init__(f"{entity} {record_id!r} not found")
        self.entity = entity
        self.record_id = record_id

    def __str__(self) -> str:
        return self.args[0]


class Repository(Protocol[Row]):
    def list(self) -> List[Row]: ...
    def get(self, record_id: str) -> Row: ...
    def insert(self, fields: Dict[str, Any]) -> Row: ...
    def update(self, record_id: str, fields: Dict[str, Any]) -> Row: ...
    def delete(self, record_id: str) -> None: ...


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryRepository(Generic[Row]):
    def __init__(
        self,
        model: Type[Row],
        order_by: str = "created_at",
        clock: Callable[[], datetime] = utc_now,
    ):
        self.model = model
        self.order_by = order_by
        self.clock = clock
        self._rows: Dict[str, Row] = {}

    @property
    def entity(self) -> str:
        return self.model.__name__

    def list(self) -> List[Row]:
        # ties keep insertion order
        return sorted(
            self._rows.values(),
            key=lambda r: getattr(r, self.order_by),
            reverse=True,
        )

    def get(self, record_id: str) -> Row:
        try:
            return self._rows[record_id]
        except KeyError:
            raise RecordNotFoundError(self.entity, record_id) from None

    def insert(self, fields: Dict[str, Any]) -> Row:
        now = self.clock()
        data = dict(fields)
        data["id"] = str(uuid.uuid4())
        data.setdefault("created_at", now)
        if "updated_at" in self.model.model_fields:
            data.setdefault("updated_at", now)

        row = self.model.model_validate(data)
        self._commit({**self._rows, row.id: row})
        logger.info(f"Inserted {self.entity} {row.id}")
        return row

    def update(self, record_id: str, fields: Dict[str, Any]) -> Row:
        current = self.get(record_id)
        data = current.model_dump()
        data.update(fields)
        data["id"] = current.id
        if "updated_at" in self.model.model_fields:
            data["updated_at"] = self.clock()

        row = self.model.model_validate(data)
        self._commit({**self._rows, record_id: row})
        logger.info(f"Updated {self.entity} {record_id}: {sorted(fields)}")
        return row

    def delete(self, record_id: str) -> None:
        self.get(record_id)
        self._commit({k: v for k, v in self._rows.items() if k != record_id})
        logger.info(f"Deleted {self.entity} {record_id}")

    def _commit(self, rows: Dict[str, Row]) -> None:
        # rows become visible only once they were written out
        self._persist(rows)
        self._rows = rows

    def _persist(self, rows: Dict[str, Row]) -> None:
        """Hook for file-backed subclasses."""
