"""Monthly lateness report as delimited text.

The layout is a fixed contract consumed by spreadsheet imports:

    Rapport de retards - <class> - <month> <year>
    <blank>
    Nom,Délais,Retards,Minutes de retard, Moyenne
    <name>,<days>,<tardies>,<minutes>,<average>   (one per student)
    <blank>
    Total,<days>,<tardies>,<minutes>,<average>

Fields are written verbatim unless ``quote`` is set, in which case data rows
use RFC 4180 quoting so names containing commas or quotes survive.
"""
from __future__ import annotations

import csv
import io
from typing import Iterable

from ..common.numbers import safe_average
from ..core.constants import CSV_HEADER, CSV_TITLE
from .model import MonthlyReport


def _row(fields: Iterable[object], *, quote: bool) -> str:
    values = [str(f) for f in fields]
    if not quote:
        return ",".join(values)

    out = io.StringIO()
    writer = csv.writer(out, lineterminator="")
    writer.writerow(values)
    return out.getvalue()


def render_monthly_csv(report: MonthlyReport, *, quote: bool = False) -> str:
    lines = [
        CSV_TITLE.format(class_name=report.class_name, month_name=report.month_name, year=report.year),
        "",
        CSV_HEADER,
    ]

    for s in report.students:
        lines.append(
            _row([s.name, s.total_days, s.tardies, s.total_minutes_late, s.avg_minutes_late], quote=quote)
        )

    total_days = sum(s.total_days for s in report.students)
    total_tardies = sum(s.tardies for s in report.students)
    total_minutes = sum(s.total_minutes_late for s in report.students)

    lines.append("")
    lines.append(
        _row(
            ["Total", total_days, total_tardies, total_minutes, safe_average(total_minutes, total_tardies)],
            quote=quote,
        )
    )
    return "\n".join(lines)
