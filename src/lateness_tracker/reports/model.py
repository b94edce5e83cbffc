from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import ArrivalStatus


@dataclass(frozen=True)
class ArrivalDetail:
    date: str
    time: str
    minutes_late: int

    def to_dict(self) -> dict:
        return {"date": self.date, "time": self.time, "minutesLate": self.minutes_late}


@dataclass(frozen=True)
class StudentMonthlyRow:
    """Read-model: one student's rollup inside a monthly report."""

    id: str
    name: str
    photo_url: Optional[str]
    total_days: int
    on_time: int
    tardies: int
    total_minutes_late: int
    avg_minutes_late: int
    arrivals: list[ArrivalDetail] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "photoUrl": self.photo_url,
            "totalDays": self.total_days,
            "onTime": self.on_time,
            "tardies": self.tardies,
            "totalMinutesLate": self.total_minutes_late,
            "avgMinutesLate": self.avg_minutes_late,
            "arrivals": [a.to_dict() for a in self.arrivals],
        }


@dataclass(frozen=True)
class MonthlyReport:
    class_id: str
    class_name: str
    year: int
    month: int
    month_name: str
    generated_at: str
    start_date: str
    end_date: str
    students: list[StudentMonthlyRow] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "classId": self.class_id,
            "className": self.class_name,
            "year": self.year,
            "month": self.month,
            "monthName": self.month_name,
            "generatedAt": self.generated_at,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "students": [s.to_dict() for s in self.students],
        }


@dataclass(frozen=True)
class DailySheetRow:
    id: str
    name: str
    photo_url: Optional[str]
    arrived: bool
    time: Optional[str]
    minutes_late: int
    status: ArrivalStatus

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "photoUrl": self.photo_url,
            "arrived": self.arrived,
            "time": self.time,
            "minutesLate": self.minutes_late,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class DailySheet:
    class_id: str
    class_name: str
    date: str
    students: list[DailySheetRow] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "classId": self.class_id,
            "className": self.class_name,
            "date": self.date,
            "students": [s.to_dict() for s in self.students],
        }


@dataclass(frozen=True)
class ImportResult:
    success: bool
    error: Optional[str] = None

    def to_dict(self) -> dict:
        out: dict = {"success": self.success}
        if self.error:
            out["error"] = self.error
        return out
