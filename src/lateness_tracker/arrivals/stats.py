from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..common.numbers import percentage, safe_average
from ..core.enums import ArrivalStatus
from .model import Arrival, ClassStats, StudentStats


def in_range(arrivals: Iterable[Arrival], start_date: Optional[str] = None, end_date: Optional[str] = None) -> list[Arrival]:
    """Inclusive date filter; ISO dates compare chronologically as strings."""

    out = list(arrivals)
    if start_date:
        out = [a for a in out if a.date >= start_date]
    if end_date:
        out = [a for a in out if a.date <= end_date]
    return out


def summarize(arrivals: Sequence[Arrival]) -> StudentStats:
    tardies = [a for a in arrivals if a.is_late]
    total_minutes_late = sum(a.minutes_late for a in arrivals)
    return StudentStats(
        total_arrivals=len(arrivals),
        on_time=sum(1 for a in arrivals if a.status == ArrivalStatus.ON_TIME),
        tardies=len(tardies),
        total_minutes_late=total_minutes_late,
        avg_minutes_late=safe_average(total_minutes_late, len(tardies)),
    )


def summarize_class(arrivals: Sequence[Arrival]) -> ClassStats:
    base = summarize(arrivals)
    return ClassStats(
        total_arrivals=base.total_arrivals,
        on_time=base.on_time,
        tardies=base.tardies,
        total_minutes_late=base.total_minutes_late,
        avg_minutes_late=base.avg_minutes_late,
        lateness_rate=percentage(base.tardies, base.total_arrivals),
    )
