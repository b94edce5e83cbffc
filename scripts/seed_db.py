"""Seed a demo class with a few students and arrivals."""

from __future__ import annotations

import importlib
from datetime import date, timedelta

from lateness_tracker.config import get_settings_module
from lateness_tracker.container import build_container, build_store

DEMO_STUDENTS = ["Amal", "Élodie", "Zara", "Ёлка", "Jonas"]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_store(
        settings.STORAGE_BACKEND,
        namespace=settings.STORAGE_NAMESPACE,
        data_dir=settings.DATA_DIR,
        db_config=settings.DB_CONFIG,
        auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
    )
    container = build_container(store=store)

    demo = container.class_service.add("1AEP")
    students = [container.student_service.add(name, demo.id) for name in DEMO_STUDENTS]

    # Last five school days, one student a bit later each day.
    day = date.today()
    marked = 0
    while marked < 5:
        day -= timedelta(days=1)
        if day.weekday() == 6:
            continue
        for offset, s in enumerate(students):
            minute = 25 + offset * 3 + marked
            container.arrival_service.mark_arrival(s.id, demo.id, day.isoformat(), f"12:{minute:02d}")
        marked += 1

    print(f"OK: Seeded class {demo.name} ({demo.id}) with {len(students)} students")


if __name__ == "__main__":
    main()
