from __future__ import annotations

from typing import Any, Mapping, Protocol


class KeyValueStore(Protocol):
    """Namespaced key-value surface with JSON-serializable values.

    Keys are unprefixed (``"classes"``); the namespace is an adapter detail.
    """

    namespace: str

    def get(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> bool:
        """Persist ``value`` under ``key``.

        Returns False when the write is refused (unserializable value, quota,
        I/O or database error). Callers decide how to surface it.
        """

        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError

    def export_all(self) -> dict[str, Any]:
        """All keys of the namespace as ``{unprefixed_key: value}``."""

        raise NotImplementedError

    def import_all(self, data: Mapping[str, Any]) -> bool:
        """Bulk overwrite of every key present in ``data``."""

        raise NotImplementedError

    def clear_all(self) -> None:
        raise NotImplementedError
