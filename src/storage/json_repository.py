from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, Type

from storage.repository import InMemoryRepository, RepositoryError, Row, utc_now

logger = logging.getLogger(__name__)


class JsonFileRepository(InMemoryRepository[Row]):
    """Keeps every row in one JSON file, rewritten after each write."""

    def __init__(
        self,
        model: Type[Row],
        path: str,
        order_by: str = "created_at",
        clock: Callable[[], datetime] = utc_now,
    ):
        super().__init__(model, order_by=order_by, clock=clock)
        self.path = Path(path)
        self._load()

    def _load(self) -> None:
        if not self.path.exists():
            return

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            rows = [self.model.model_validate(item) for item in data]
        except (OSError, ValueError) as e:
            # pydantic.ValidationError is a ValueError
            logger.error(f"Failed to load {self.path}: {e}")
            raise RepositoryError(f"cannot read {self.path}: {e}") from e

        self._rows = {row.id: row for row in rows}
        logger.info(f"Loaded {len(rows)} {self.entity} rows from {self.path}")

    def _persist(self, rows: Dict[str, Row]) -> None:
        data = [row.model_dump(mode="json") for row in rows.values()]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(data, ensure_ascii=False, indent=2),
                encoding="utf-8",
            )
        except OSError as e:
            logger.error(f"Failed to write {self.path}: {e}")
            raise RepositoryError(f"cannot write {self.path}: {e}") from e
