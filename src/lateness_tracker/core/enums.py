from __future__ import annotations

from enum import Enum


class ArrivalStatus(str, Enum):
    """Lateness verdict frozen onto an arrival record."""

    ON_TIME = "on-time"
    LATE = "late"
    # Only used by daily sheets, never stored.
    ABSENT = "absent"


class StorageBackend(str, Enum):
    MEMORY = "memory"
    FILE = "file"
    MYSQL = "mysql"
