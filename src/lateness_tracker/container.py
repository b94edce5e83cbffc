from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .arrivals.service import ArrivalService
from .classes.service import ClassService
from .core.constants import DEFAULT_NAMESPACE
from .core.enums import StorageBackend
from .reports.service import ReportService
from .storage.json_file_store import JsonFileKeyValueStore
from .storage.memory_store import InMemoryKeyValueStore
from .storage.repository import KeyValueStore
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    class_service: ClassService
    student_service: StudentService
    arrival_service: ArrivalService
    report_service: ReportService

    def load(self) -> None:
        """Ordered startup load; must finish before any mutation."""

        self.class_service.load()
        self.student_service.load()
        self.arrival_service.load()


def build_store(
    backend: str,
    *,
    namespace: str = DEFAULT_NAMESPACE,
    data_dir: str | Path = "data",
    db_config: Optional[dict] = None,
    auto_init_db: bool = False,
) -> KeyValueStore:
    backend = StorageBackend(str(backend).lower())

    if backend == StorageBackend.MEMORY:
        return InMemoryKeyValueStore(namespace)

    if backend == StorageBackend.FILE:
        return JsonFileKeyValueStore(data_dir, namespace)

    # Imported lazily so memory/file setups do not need a MySQL driver at import time.
    from .database.bootstrap import apply_schema
    from .database.connection import DatabaseConnection, DBConfig
    from .storage.mysql_store import MySQLKeyValueStore

    conn = DatabaseConnection(DBConfig.from_dict(db_config or {}))
    if auto_init_db:
        apply_schema(conn)
    return MySQLKeyValueStore(conn, namespace)


def build_container(*, store: KeyValueStore, csv_quote_fields: bool = False) -> Container:
    class_service = ClassService(store)
    student_service = StudentService(store)
    arrival_service = ArrivalService(store, class_service)
    report_service = ReportService(
        store,
        class_service,
        student_service,
        arrival_service,
        csv_quote_fields=csv_quote_fields,
    )

    container = Container(
        store=store,
        class_service=class_service,
        student_service=student_service,
        arrival_service=arrival_service,
        report_service=report_service,
    )
    container.load()
    return container
