from __future__ import annotations

from datetime import datetime

import pytest

from lateness_tracker.arrivals.service import ArrivalService
from lateness_tracker.classes.service import ClassService
from lateness_tracker.reports.service import ReportService
from lateness_tracker.storage.memory_store import InMemoryKeyValueStore
from lateness_tracker.students.service import StudentService


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    # Monday 5 Feb 2024, 12:40
    return FixedClock(datetime(2024, 2, 5, 12, 40, 0))


@pytest.fixture
def store():
    return InMemoryKeyValueStore("test")


@pytest.fixture
def classes(store, clock):
    svc = ClassService(store, clock=clock)
    svc.load()
    return svc


@pytest.fixture
def students(store, clock):
    svc = StudentService(store, clock=clock)
    svc.load()
    return svc


@pytest.fixture
def arrivals(store, classes, clock):
    svc = ArrivalService(store, classes, clock=clock)
    svc.load()
    return svc


@pytest.fixture
def reports(store, classes, students, arrivals, clock):
    return ReportService(store, classes, students, arrivals, clock=clock)
