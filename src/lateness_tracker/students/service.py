from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from ..common.collation import name_sort_key
from ..common.datetime_utils import now_local
from ..common.ids import generate_id
from ..common.validators import require_non_empty
from ..core.constants import STUDENTS_KEY
from ..storage.repository import KeyValueStore
from .model import CsvImportResult, Student

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "class_id", "photo_url")


class StudentService:
    """Student directory: plain CRUD plus name-sorted listings."""

    def __init__(self, store: KeyValueStore, *, clock: Callable[[], datetime] = now_local):
        self._store = store
        self._clock = clock
        self._students: list[Student] = []

    def load(self) -> None:
        raw = self._store.get(STUDENTS_KEY, []) or []
        self._students = [Student.from_dict(s) for s in raw if isinstance(s, Mapping)]

    def save(self) -> bool:
        ok = self._store.set(STUDENTS_KEY, [s.to_dict() for s in self._students])
        if not ok:
            logger.warning("Students could not be persisted; in-memory state is ahead of storage")
        return ok

    def get_all(self) -> list[Student]:
        return list(self._students)

    def get_by_class(self, class_id: str) -> list[Student]:
        return [s for s in self._students if s.class_id == class_id]

    def get_by_id(self, student_id: str) -> Optional[Student]:
        for s in self._students:
            if s.id == student_id:
                return s
        return None

    def get_sorted_by_name(self, class_id: str) -> list[Student]:
        return sorted(self.get_by_class(class_id), key=lambda s: name_sort_key(s.name))

    def add(self, name: str, class_id: str, photo_url: Optional[str] = None) -> Student:
        student = Student(
            id=generate_id("stu"),
            name=require_non_empty(name, "Student name"),
            class_id=class_id,
            created_at=self._clock().isoformat(),
            photo_url=photo_url or None,
        )
        self._students.append(student)
        self.save()
        return student

    def update(self, student_id: str, **changes: Any) -> Optional[Student]:
        for index, s in enumerate(self._students):
            if s.id != student_id:
                continue

            fields = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
            if "name" in fields:
                fields["name"] = require_non_empty(fields["name"], "Student name")

            updated = replace(s, **fields)
            self._students[index] = updated
            self.save()
            return updated
        return None

    def delete(self, student_id: str) -> bool:
        """Remove a student. Their arrivals stay in the ledger."""

        remaining = [s for s in self._students if s.id != student_id]
        if len(remaining) == len(self._students):
            return False
        self._students = remaining
        self.save()
        return True

    def import_from_csv(self, content: str, class_id: str) -> CsvImportResult:
        """Bulk-add students from ``name,photoUrl`` lines.

        A first line mentioning "name" is treated as a header.
        """

        result = CsvImportResult()
        lines = (content or "").strip().splitlines()
        if not lines:
            return result

        start_index = 1 if "name" in lines[0].lower() else 0
        for i in range(start_index, len(lines)):
            line = lines[i].strip()
            if not line:
                continue

            parts = [p.strip() for p in line.split(",")]
            name = parts[0]
            photo_url = parts[1] if len(parts) > 1 and parts[1] else None

            if name:
                self.add(name, class_id, photo_url)
                result.imported += 1
            else:
                result.errors.append(f"Line {i + 1}: Empty name")

        return result
