from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import mysql.connector

from ..core.constants import DEFAULT_NAMESPACE
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone

logger = logging.getLogger(__name__)


class MySQLKeyValueStore:
    """Store persisted in the ``kv_store`` table, one row per key."""

    def __init__(self, conn_factory: DatabaseConnection, namespace: str = DEFAULT_NAMESPACE):
        self._conn_factory = conn_factory
        self.namespace = namespace

    def get(self, key: str, default: Any = None) -> Any:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "SELECT item_value FROM kv_store WHERE namespace=%s AND item_key=%s",
                    (self.namespace, key),
                )
                r = fetchone(cur)
        except mysql.connector.Error as e:
            logger.error("Storage read error: %s (%s)", key, e)
            return default

        if not r:
            return default
        try:
            return json.loads(r["item_value"])
        except ValueError:
            logger.error("Storage read error: %s (corrupt value)", key)
            return default

    def set(self, key: str, value: Any) -> bool:
        return self.import_all({key: value})

    def remove(self, key: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM kv_store WHERE namespace=%s AND item_key=%s", (self.namespace, key))

    def export_all(self) -> dict[str, Any]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT item_key, item_value FROM kv_store WHERE namespace=%s ORDER BY item_key",
                (self.namespace,),
            )
            rows = fetchall(cur)
        return {r["item_key"]: json.loads(r["item_value"]) for r in rows}

    def import_all(self, data: Mapping[str, Any]) -> bool:
        """Write every key in a single transaction."""

        try:
            params = [
                (self.namespace, key, json.dumps(value, ensure_ascii=False))
                for key, value in data.items()
            ]
        except (TypeError, ValueError) as e:
            logger.error("Storage error: unserializable value (%s)", e)
            return False

        try:
            with db_cursor(self._conn_factory) as (_, cur):
                for p in params:
                    cur.execute(
                        """
                        INSERT INTO kv_store(namespace, item_key, item_value)
                        VALUES(%s,%s,%s)
                        ON DUPLICATE KEY UPDATE item_value=VALUES(item_value)
                        """,
                        p,
                    )
        except mysql.connector.Error as e:
            logger.error("Storage error: %s", e)
            return False
        return True

    def clear_all(self) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM kv_store WHERE namespace=%s", (self.namespace,))
