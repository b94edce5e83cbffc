from __future__ import annotations

from functools import lru_cache

from pyuca import Collator


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loading the collation table is slow; do it once per process.
    return Collator()


def name_sort_key(name: str) -> tuple:
    """Locale-aware sort key for person names.

    Uses the Unicode Collation Algorithm so accented Latin, Cyrillic, Greek,
    Arabic... names sort linguistically instead of by code point.
    """
    return _collator().sort_key(name or "")
