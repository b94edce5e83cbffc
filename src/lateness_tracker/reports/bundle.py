"""Shape checks for whole-store import bundles.

Every check runs before the store is touched, so a rejected bundle leaves the
previous data in place.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Mapping

from ..arrivals.model import Arrival
from ..classes.model import SchoolClass
from ..common.datetime_utils import parse_iso_date
from ..core.constants import ARRIVALS_KEY, CLASSES_KEY, STUDENTS_KEY
from ..core.enums import ArrivalStatus
from ..core.exceptions import ImportPayloadError
from ..students.model import Student

# String fields every stored entity of a core key must carry.
REQUIRED_FIELDS = {
    CLASSES_KEY: ("id", "name"),
    STUDENTS_KEY: ("id", "name", "classId"),
    ARRIVALS_KEY: ("id", "studentId", "date"),
}

ENTITY_PARSERS: dict[str, Callable[[Mapping[str, Any]], Any]] = {
    CLASSES_KEY: SchoolClass.from_dict,
    STUDENTS_KEY: Student.from_dict,
    ARRIVALS_KEY: Arrival.from_dict,
}

STORED_STATUSES = (ArrivalStatus.ON_TIME.value, ArrivalStatus.LATE.value)


def _is_hhmm(value: Any) -> bool:
    if not isinstance(value, str) or len(value) != 5:
        return False
    try:
        datetime.strptime(value, "%H:%M")
    except ValueError:
        return False
    return True


def _is_iso_date(value: Any) -> bool:
    if not isinstance(value, str) or len(value) != 10:
        return False
    try:
        parse_iso_date(value)
    except ValueError:
        return False
    return True


def _check_optional_str(item: Mapping[str, Any], field: str, where: str) -> None:
    if item.get(field) is not None and not isinstance(item[field], str):
        raise ImportPayloadError(f"'{where}.{field}' must be a string")


def _check_schedule(schedule: Any, where: str) -> None:
    if schedule is None:
        return
    if not isinstance(schedule, dict):
        raise ImportPayloadError(f"'{where}' must be an object")

    for day, entry in schedule.items():
        day_where = f"{where}.{day}"
        if not isinstance(entry, dict):
            raise ImportPayloadError(f"'{day_where}' must be an object")
        if not isinstance(entry.get("enabled"), bool):
            raise ImportPayloadError(f"'{day_where}.enabled' must be true or false")
        for field in ("startTime", "endTime"):
            if field in entry and not _is_hhmm(entry[field]):
                raise ImportPayloadError(f"'{day_where}.{field}' must be an HH:MM string")


def _check_arrival(item: Mapping[str, Any], where: str) -> None:
    if not _is_iso_date(item["date"]):
        raise ImportPayloadError(f"'{where}.date' must be a YYYY-MM-DD date")
    _check_optional_str(item, "classId", where)
    _check_optional_str(item, "createdAt", where)
    if "time" in item and not _is_hhmm(item["time"]):
        raise ImportPayloadError(f"'{where}.time' must be an HH:MM string")

    minutes_late = item.get("minutesLate", 0)
    if isinstance(minutes_late, bool) or not isinstance(minutes_late, int) or minutes_late < 0:
        raise ImportPayloadError(f"'{where}.minutesLate' must be a non-negative integer")
    if "status" in item and item["status"] not in STORED_STATUSES:
        raise ImportPayloadError(f"'{where}.status' must be one of {', '.join(STORED_STATUSES)}")


def validate_bundle(data: Any) -> None:
    """Check an import bundle's shape before anything is written.

    Raises ImportPayloadError describing the first problem found.
    """

    if not isinstance(data, dict):
        raise ImportPayloadError("Import payload must be a JSON object")

    for key, fields in REQUIRED_FIELDS.items():
        if key not in data:
            continue
        items = data[key]
        if not isinstance(items, list):
            raise ImportPayloadError(f"'{key}' must be an array")

        for index, item in enumerate(items):
            where = f"{key}[{index}]"
            if not isinstance(item, dict):
                raise ImportPayloadError(f"'{where}' must be an object")
            missing = [f for f in fields if f not in item]
            if missing:
                raise ImportPayloadError(f"'{where}' is missing {', '.join(missing)}")
            for f in fields:
                if not isinstance(item[f], str):
                    raise ImportPayloadError(f"'{where}.{f}' must be a string")
            _check_optional_str(item, "createdAt", where)

            if key == CLASSES_KEY:
                _check_schedule(item.get("schedule"), f"{where}.schedule")
            elif key == STUDENTS_KEY:
                _check_optional_str(item, "photoUrl", where)
            else:
                _check_arrival(item, where)

            try:
                ENTITY_PARSERS[key](item)
            except (TypeError, ValueError) as e:
                raise ImportPayloadError(f"'{where}' is invalid: {e}") from e

    if ARRIVALS_KEY in data:
        seen: set[tuple[str, str]] = set()
        for item in data[ARRIVALS_KEY]:
            pair = (item["studentId"], item["date"])
            if pair in seen:
                raise ImportPayloadError(f"Duplicate arrival for student {pair[0]} on {pair[1]}")
            seen.add(pair)
