from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Mapping, Optional

from ..classes.service import ClassService
from ..common.datetime_utils import day_of_week, now_local, to_hhmm
from ..common.ids import generate_id
from ..core.constants import ARRIVALS_KEY
from ..storage.repository import KeyValueStore
from .factory import LatenessStrategyFactory
from .model import Arrival, ClassStats, MarkArrivalResult, StudentStats
from .stats import in_range, summarize, summarize_class

logger = logging.getLogger(__name__)


class ArrivalService:
    """Arrival ledger: append/remove-only record of who arrived when.

    Lateness is decided once, from the class schedule in effect when the
    arrival is marked, and stored on the record.
    """

    def __init__(
        self,
        store: KeyValueStore,
        classes: ClassService,
        *,
        strategy_factory: LatenessStrategyFactory | None = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._store = store
        self._classes = classes
        self._factory = strategy_factory or LatenessStrategyFactory()
        self._clock = clock
        self._arrivals: list[Arrival] = []

    def load(self) -> None:
        raw = self._store.get(ARRIVALS_KEY, []) or []
        self._arrivals = [Arrival.from_dict(a) for a in raw if isinstance(a, Mapping)]

    def save(self) -> bool:
        ok = self._store.set(ARRIVALS_KEY, [a.to_dict() for a in self._arrivals])
        if not ok:
            logger.warning("Arrivals could not be persisted; in-memory state is ahead of storage")
        return ok

    def get_all(self) -> list[Arrival]:
        return list(self._arrivals)

    def get_by_date(self, date: str) -> list[Arrival]:
        return [a for a in self._arrivals if a.date == date]

    def get_by_class_and_date(self, class_id: str, date: str) -> list[Arrival]:
        return [a for a in self._arrivals if a.class_id == class_id and a.date == date]

    def has_arrived(self, student_id: str, date: str) -> Optional[Arrival]:
        for a in self._arrivals:
            if a.student_id == student_id and a.date == date:
                return a
        return None

    def mark_arrival(self, student_id: str, class_id: str, date: str, time: Optional[str] = None) -> MarkArrivalResult:
        existing = self.has_arrived(student_id, date)
        if existing:
            return MarkArrivalResult(success=False, arrival=existing, message="Already marked")

        now = self._clock()
        arrival_time = time or to_hhmm(now)

        day = self._classes.get_schedule_for_day(class_id, day_of_week(date))
        strategy = self._factory.for_day(day)
        decision = strategy.decide(arrival_time=arrival_time, day=day)

        arrival = Arrival(
            id=generate_id("arr"),
            student_id=student_id,
            class_id=class_id,
            date=date,
            time=arrival_time,
            minutes_late=decision.minutes_late,
            status=decision.status,
            created_at=now.isoformat(),
        )
        self._arrivals.append(arrival)
        persisted = self.save()

        logger.debug("Marked %s on %s at %s: %s", student_id, date, arrival_time, decision.status.value)
        return MarkArrivalResult(success=True, arrival=arrival, persisted=persisted)

    def remove_arrival(self, student_id: str, date: str) -> bool:
        """Undo a mark. Returns whether a record was deleted."""

        for index, a in enumerate(self._arrivals):
            if a.student_id == student_id and a.date == date:
                del self._arrivals[index]
                self.save()
                return True
        return False

    def get_student_stats(self, student_id: str, start_date: Optional[str] = None, end_date: Optional[str] = None) -> StudentStats:
        rows = in_range((a for a in self._arrivals if a.student_id == student_id), start_date, end_date)
        return summarize(rows)

    def get_class_stats(self, class_id: str, start_date: Optional[str] = None, end_date: Optional[str] = None) -> ClassStats:
        rows = in_range((a for a in self._arrivals if a.class_id == class_id), start_date, end_date)
        return summarize_class(rows)
