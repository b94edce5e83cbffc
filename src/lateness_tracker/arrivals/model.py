from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import ArrivalStatus


def _parse_status(value: Any, minutes_late: int) -> ArrivalStatus:
    if value in (ArrivalStatus.ON_TIME.value, ArrivalStatus.LATE.value):
        return ArrivalStatus(value)
    return ArrivalStatus.LATE if minutes_late > 0 else ArrivalStatus.ON_TIME


@dataclass(frozen=True)
class Arrival:
    """Domain entity: one student present on one date.

    ``minutes_late`` and ``status`` are frozen when the record is created.
    """

    id: str
    student_id: str
    class_id: str
    date: str
    time: str
    minutes_late: int
    status: ArrivalStatus
    created_at: str

    @property
    def is_late(self) -> bool:
        return self.status == ArrivalStatus.LATE

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Arrival":
        minutes_late = int(data.get("minutesLate") or 0)
        return cls(
            id=str(data.get("id", "")),
            student_id=str(data.get("studentId", "")),
            class_id=str(data.get("classId", "")),
            date=str(data.get("date", "")),
            time=str(data.get("time", "")),
            minutes_late=minutes_late,
            status=_parse_status(data.get("status"), minutes_late),
            created_at=str(data.get("createdAt", "")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "studentId": self.student_id,
            "classId": self.class_id,
            "date": self.date,
            "time": self.time,
            "minutesLate": self.minutes_late,
            "status": self.status.value,
            "createdAt": self.created_at,
        }


@dataclass(frozen=True)
class MarkArrivalResult:
    success: bool
    arrival: Arrival
    message: Optional[str] = None
    persisted: bool = True

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"success": self.success, "arrival": self.arrival.to_dict()}
        if self.message:
            out["message"] = self.message
        if not self.success:
            out["existingRecord"] = self.arrival.to_dict()
        if not self.persisted:
            out["persisted"] = False
        return out


@dataclass(frozen=True)
class StudentStats:
    total_arrivals: int
    on_time: int
    tardies: int
    total_minutes_late: int
    avg_minutes_late: int

    def to_dict(self) -> dict:
        return {
            "totalArrivals": self.total_arrivals,
            "onTime": self.on_time,
            "tardies": self.tardies,
            "totalMinutesLate": self.total_minutes_late,
            "avgMinutesLate": self.avg_minutes_late,
        }


@dataclass(frozen=True)
class ClassStats(StudentStats):
    lateness_rate: int = 0

    def to_dict(self) -> dict:
        out = super().to_dict()
        out["latenessRate"] = self.lateness_rate
        return out
