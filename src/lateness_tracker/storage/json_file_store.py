from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping

from ..core.constants import DEFAULT_NAMESPACE

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore:
    """Store persisted as one JSON document per namespace.

    The file holds the same flat ``{key: value}`` object used by the export
    bundle, so it can be inspected or copied by hand.
    """

    def __init__(self, data_dir: str | Path, namespace: str = DEFAULT_NAMESPACE):
        self.namespace = namespace
        self._path = Path(data_dir) / f"{namespace}.json"

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Storage read error: %s (%s)", self._path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: dict[str, Any]) -> bool:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self._path.with_suffix(".json.tmp")
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=4)
            os.replace(tmp_path, self._path)
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.error("Storage error: %s (%s)", self._path, e)
            return False

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> bool:
        data = self._load()
        data[key] = value
        return self._save(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)

    def export_all(self) -> dict[str, Any]:
        return self._load()

    def import_all(self, data: Mapping[str, Any]) -> bool:
        current = self._load()
        current.update(data)
        return self._save(current)

    def clear_all(self) -> None:
        if self._path.exists():
            self._path.unlink()
