from __future__ import annotations

from typing import Optional

from ...classes.model import DaySchedule
from ...common.datetime_utils import minutes_of_day
from ...core.enums import ArrivalStatus
from .base import LatenessDecision, LatenessStrategy


class StartTimeStrategy(LatenessStrategy):
    """Late by the whole minutes between scheduled start and arrival."""

    def decide(self, *, arrival_time: str, day: Optional[DaySchedule]) -> LatenessDecision:
        minutes_late = max(0, minutes_of_day(arrival_time) - minutes_of_day(day.start_time))
        status = ArrivalStatus.LATE if minutes_late > 0 else ArrivalStatus.ON_TIME
        return LatenessDecision(status=status, minutes_late=minutes_late)
