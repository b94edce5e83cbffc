from __future__ import annotations

import uuid


def generate_id(prefix: str) -> str:
    """Mint an opaque id such as ``arr_3f2a...``."""
    return f"{prefix}_{uuid.uuid4().hex}"
