from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from ..arrivals.service import ArrivalService
from ..arrivals.stats import in_range, summarize
from ..classes.service import ClassService
from ..common.collation import name_sort_key
from ..common.datetime_utils import month_bounds, now_local
from ..core.constants import MONTH_NAMES
from ..core.enums import ArrivalStatus
from ..core.exceptions import ImportPayloadError
from ..storage.repository import KeyValueStore
from ..students.service import StudentService
from .bundle import validate_bundle
from .csv_export import render_monthly_csv
from .model import (
    ArrivalDetail,
    DailySheet,
    DailySheetRow,
    ImportResult,
    MonthlyReport,
    StudentMonthlyRow,
)

logger = logging.getLogger(__name__)


class ReportService:
    """Read-only rollups over the registry, directory and ledger.

    Also owns whole-store JSON export/import, since an import has to reload
    every component afterwards.
    """

    def __init__(
        self,
        store: KeyValueStore,
        classes: ClassService,
        students: StudentService,
        arrivals: ArrivalService,
        *,
        csv_quote_fields: bool = False,
        clock: Callable[[], datetime] = now_local,
    ):
        self._store = store
        self._classes = classes
        self._students = students
        self._arrivals = arrivals
        self._csv_quote_fields = bool(csv_quote_fields)
        self._clock = clock

    def generate_monthly_report(self, class_id: str, year: int, month: int) -> Optional[MonthlyReport]:
        class_obj = self._classes.get_by_id(class_id)
        if not class_obj:
            return None

        start_date, end_date = month_bounds(year, month)
        all_arrivals = self._arrivals.get_all()

        rows: list[StudentMonthlyRow] = []
        for student in self._students.get_by_class(class_id):
            arrivals = in_range((a for a in all_arrivals if a.student_id == student.id), start_date, end_date)
            arrivals.sort(key=lambda a: (a.date, a.time))
            stats = summarize(arrivals)

            rows.append(
                StudentMonthlyRow(
                    id=student.id,
                    name=student.name,
                    photo_url=student.photo_url,
                    total_days=stats.total_arrivals,
                    on_time=stats.on_time,
                    tardies=stats.tardies,
                    total_minutes_late=stats.total_minutes_late,
                    avg_minutes_late=stats.avg_minutes_late,
                    arrivals=[ArrivalDetail(date=a.date, time=a.time, minutes_late=a.minutes_late) for a in arrivals],
                )
            )

        rows.sort(key=lambda r: name_sort_key(r.name))

        return MonthlyReport(
            class_id=class_id,
            class_name=class_obj.name,
            year=int(year),
            month=int(month),
            month_name=MONTH_NAMES[int(month) - 1],
            generated_at=self._clock().isoformat(),
            start_date=start_date,
            end_date=end_date,
            students=rows,
        )

    def generate_daily_sheet(self, class_id: str, date: str) -> Optional[DailySheet]:
        class_obj = self._classes.get_by_id(class_id)
        if not class_obj:
            return None

        marked = {a.student_id: a for a in self._arrivals.get_by_class_and_date(class_id, date)}

        rows: list[DailySheetRow] = []
        for s in self._students.get_sorted_by_name(class_id):
            arrival = marked.get(s.id)
            rows.append(
                DailySheetRow(
                    id=s.id,
                    name=s.name,
                    photo_url=s.photo_url,
                    arrived=arrival is not None,
                    time=arrival.time if arrival else None,
                    minutes_late=arrival.minutes_late if arrival else 0,
                    status=arrival.status if arrival else ArrivalStatus.ABSENT,
                )
            )

        return DailySheet(class_id=class_id, class_name=class_obj.name, date=date, students=rows)

    def generate_csv(self, report: MonthlyReport, *, quote: Optional[bool] = None) -> str:
        return render_monthly_csv(report, quote=self._csv_quote_fields if quote is None else quote)

    def export_json(self) -> str:
        return json.dumps(self._store.export_all(), ensure_ascii=False, indent=2)

    def import_json(self, json_data: str) -> ImportResult:
        """Replace store contents from an export bundle, all or nothing."""

        try:
            data = json.loads(json_data)
            validate_bundle(data)
        except (ValueError, ImportPayloadError) as e:
            logger.warning("Import rejected: %s", e)
            return ImportResult(success=False, error=str(e))

        snapshot = self._store.export_all()
        if not self._store.import_all(data):
            self._restore(snapshot, data)
            logger.error("Import failed while writing; previous data restored")
            return ImportResult(success=False, error="Storage write failed")

        self.reload()
        logger.info("Imported keys: %s", ", ".join(sorted(data)) or "-")
        return ImportResult(success=True)

    def _restore(self, snapshot: Mapping[str, Any], attempted: Mapping[str, Any]) -> None:
        for key in attempted:
            if key not in snapshot:
                self._store.remove(key)
        self._store.import_all(snapshot)

    def reload(self) -> None:
        self._classes.load()
        self._students.load()
        self._arrivals.load()
