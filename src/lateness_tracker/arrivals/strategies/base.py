from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...classes.model import DaySchedule
from ...core.enums import ArrivalStatus


@dataclass(frozen=True)
class LatenessDecision:
    status: ArrivalStatus
    minutes_late: int = 0


class LatenessStrategy(ABC):
    """Strategy Pattern: encapsulate how we classify an arrival."""

    @abstractmethod
    def decide(self, *, arrival_time: str, day: Optional[DaySchedule]) -> LatenessDecision:
        raise NotImplementedError
