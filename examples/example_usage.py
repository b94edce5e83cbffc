"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

from lateness_tracker.container import build_container
from lateness_tracker.storage.memory_store import InMemoryKeyValueStore


def main():
    container = build_container(store=InMemoryKeyValueStore())
    cls = container.class_service.add("1AEP")
    amal = container.student_service.add("Amal", cls.id)

    container.arrival_service.mark_arrival(amal.id, cls.id, "2024-02-05", "12:45")
    report = container.report_service.generate_monthly_report(cls.id, 2024, 2)
    print(container.report_service.generate_csv(report))


if __name__ == "__main__":
    main()
