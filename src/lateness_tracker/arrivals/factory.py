from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..classes.model import DaySchedule
from .strategies.base import LatenessStrategy
from .strategies.start_time_strategy import StartTimeStrategy
from .strategies.unscheduled_strategy import UnscheduledStrategy


@dataclass
class LatenessStrategyFactory:
    """Factory Pattern: choose the strategy matching the day's schedule."""

    def for_day(self, day: Optional[DaySchedule]) -> LatenessStrategy:
        if not day or not day.enabled or not day.start_time:
            return UnscheduledStrategy()
        return StartTimeStrategy()
