from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from ..common.datetime_utils import now_local
from ..common.ids import generate_id
from ..core.constants import CLASSES_KEY
from ..storage.repository import KeyValueStore
from .model import DaySchedule, SchoolClass, WeeklySchedule

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "schedule")


class ClassService:
    """Schedule registry: owns classes and their weekly time windows.

    Lookups return None for unknown ids; nothing here raises on malformed
    input.
    """

    def __init__(self, store: KeyValueStore, *, clock: Callable[[], datetime] = now_local):
        self._store = store
        self._clock = clock
        self._classes: list[SchoolClass] = []

    def load(self) -> None:
        raw = self._store.get(CLASSES_KEY, []) or []
        self._classes = [SchoolClass.from_dict(c) for c in raw if isinstance(c, Mapping)]

    def save(self) -> bool:
        ok = self._store.set(CLASSES_KEY, [c.to_dict() for c in self._classes])
        if not ok:
            logger.warning("Classes could not be persisted; in-memory state is ahead of storage")
        return ok

    def get_all(self) -> list[SchoolClass]:
        return list(self._classes)

    def get_by_id(self, class_id: str) -> Optional[SchoolClass]:
        for c in self._classes:
            if c.id == class_id:
                return c
        return None

    def add(self, name: str, schedule: WeeklySchedule | Mapping[str, Any] | None = None) -> SchoolClass:
        new_class = SchoolClass(
            id=generate_id("cls"),
            name=name,
            schedule=WeeklySchedule.coerce(schedule) if schedule else WeeklySchedule.default(),
            created_at=self._clock().isoformat(),
        )
        self._classes.append(new_class)
        self.save()
        return new_class

    def update(self, class_id: str, **changes: Any) -> Optional[SchoolClass]:
        """Shallow merge of ``name`` and/or ``schedule``.

        A new schedule replaces the whole weekly object; days are not merged.
        """

        for index, c in enumerate(self._classes):
            if c.id != class_id:
                continue

            fields: dict[str, Any] = {}
            for key, value in changes.items():
                if key not in UPDATABLE_FIELDS:
                    logger.debug("Ignoring unknown class field %r", key)
                    continue
                fields[key] = WeeklySchedule.coerce(value) if key == "schedule" else value

            updated = replace(c, **fields)
            self._classes[index] = updated
            self.save()
            return updated
        return None

    def delete(self, class_id: str) -> bool:
        """Remove a class. Students and arrivals referencing it are left as-is."""

        remaining = [c for c in self._classes if c.id != class_id]
        if len(remaining) == len(self._classes):
            return False
        self._classes = remaining
        self.save()
        return True

    def get_schedule_for_day(self, class_id: str, day_of_week: int) -> Optional[DaySchedule]:
        class_obj = self.get_by_id(class_id)
        if not class_obj:
            return None
        return class_obj.schedule.for_day(day_of_week)
