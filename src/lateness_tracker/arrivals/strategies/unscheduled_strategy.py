from __future__ import annotations

from typing import Optional

from ...classes.model import DaySchedule
from ...core.enums import ArrivalStatus
from .base import LatenessDecision, LatenessStrategy


class UnscheduledStrategy(LatenessStrategy):
    """No class that day (unknown, disabled or no start time): never late."""

    def decide(self, *, arrival_time: str, day: Optional[DaySchedule]) -> LatenessDecision:
        return LatenessDecision(status=ArrivalStatus.ON_TIME, minutes_late=0)
