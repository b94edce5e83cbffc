from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..core.constants import DAY_NAMES, DEFAULT_END_TIME, DEFAULT_START_TIME

# Storage order of the weekly schedule object.
WEEK_ORDER = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


@dataclass(frozen=True)
class DaySchedule:
    """One weekday entry: closed, or open between two HH:MM times."""

    enabled: bool
    start_time: Optional[str] = None
    end_time: Optional[str] = None

    @classmethod
    def closed(cls) -> "DaySchedule":
        return cls(enabled=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DaySchedule":
        return cls(
            enabled=bool(data.get("enabled", False)),
            start_time=data.get("startTime"),
            end_time=data.get("endTime"),
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"enabled": self.enabled}
        if self.start_time is not None:
            out["startTime"] = self.start_time
        if self.end_time is not None:
            out["endTime"] = self.end_time
        return out


@dataclass(frozen=True)
class WeeklySchedule:
    """Mapping of weekday name to its DaySchedule.

    A missing day reads as None, which callers treat like a closed day.
    """

    days: dict[str, DaySchedule] = field(default_factory=dict)

    @classmethod
    def default(cls) -> "WeeklySchedule":
        days = {
            name: DaySchedule(enabled=True, start_time=DEFAULT_START_TIME, end_time=DEFAULT_END_TIME)
            for name in WEEK_ORDER
            if name != "sunday"
        }
        days["sunday"] = DaySchedule.closed()
        return cls(days=days)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "WeeklySchedule":
        days: dict[str, DaySchedule] = {}
        for name, entry in (data or {}).items():
            if isinstance(entry, Mapping):
                days[name] = DaySchedule.from_dict(entry)
        return cls(days=days)

    @classmethod
    def coerce(cls, value: "WeeklySchedule | Mapping[str, Any] | None") -> "WeeklySchedule":
        if isinstance(value, WeeklySchedule):
            return value
        return cls.from_dict(value)

    def to_dict(self) -> dict:
        ordered = [n for n in WEEK_ORDER if n in self.days]
        ordered += [n for n in self.days if n not in WEEK_ORDER]
        return {name: self.days[name].to_dict() for name in ordered}

    def for_day(self, day_of_week: int) -> Optional[DaySchedule]:
        """Entry for a weekday index, 0 (Sunday) to 6 (Saturday)."""

        if not 0 <= int(day_of_week) < len(DAY_NAMES):
            return None
        return self.days.get(DAY_NAMES[int(day_of_week)])


@dataclass(frozen=True)
class SchoolClass:
    """A class (group of students) with its weekly schedule."""

    id: str
    name: str
    schedule: WeeklySchedule
    created_at: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SchoolClass":
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            schedule=WeeklySchedule.from_dict(data.get("schedule")),
            created_at=str(data.get("createdAt", "")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "schedule": self.schedule.to_dict(),
            "createdAt": self.created_at,
        }
