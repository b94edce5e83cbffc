from __future__ import annotations

import json
import logging
from typing import Any, Mapping, MutableMapping, Optional

from ..core.constants import DEFAULT_NAMESPACE

logger = logging.getLogger(__name__)


class InMemoryKeyValueStore:
    """Store backed by a plain dict of serialized JSON strings.

    Values are serialized on write so the store behaves like a real backend:
    callers never share mutable state with it, and unserializable values are
    refused. Several namespaces may share one ``backend`` dict.
    """

    def __init__(
        self,
        namespace: str = DEFAULT_NAMESPACE,
        *,
        backend: Optional[MutableMapping[str, str]] = None,
        quota_chars: Optional[int] = None,
    ):
        self.namespace = namespace
        self._items: MutableMapping[str, str] = backend if backend is not None else {}
        self._quota_chars = quota_chars

    def _full_key(self, key: str) -> str:
        return f"{self.namespace}:{key}"

    def _keys(self) -> list[str]:
        prefix = f"{self.namespace}:"
        return [k[len(prefix):] for k in self._items if k.startswith(prefix)]

    def get(self, key: str, default: Any = None) -> Any:
        raw = self._items.get(self._full_key(key))
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except ValueError:
            logger.error("Storage read error: %s", key)
            return default

    def set(self, key: str, value: Any) -> bool:
        try:
            raw = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error("Storage error: %s (%s)", key, e)
            return False

        if self._quota_chars is not None:
            used = sum(len(v) for k, v in self._items.items() if k != self._full_key(key))
            if used + len(raw) > self._quota_chars:
                logger.error("Storage quota exceeded while writing %s", key)
                return False

        self._items[self._full_key(key)] = raw
        return True

    def remove(self, key: str) -> None:
        self._items.pop(self._full_key(key), None)

    def export_all(self) -> dict[str, Any]:
        return {key: self.get(key) for key in self._keys()}

    def import_all(self, data: Mapping[str, Any]) -> bool:
        ok = True
        for key, value in data.items():
            ok = self.set(key, value) and ok
        return ok

    def clear_all(self) -> None:
        for key in self._keys():
            self.remove(key)
