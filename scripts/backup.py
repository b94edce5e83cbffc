"""Back up the whole store as a JSON export bundle.

The bundle is the same document served by ``GET /api/export`` and accepted
by ``POST /api/import``.
"""

from __future__ import annotations

import importlib
from datetime import datetime
from pathlib import Path

from lateness_tracker.config import get_settings_module
from lateness_tracker.container import build_container, build_store


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_store(
        settings.STORAGE_BACKEND,
        namespace=settings.STORAGE_NAMESPACE,
        data_dir=settings.DATA_DIR,
        db_config=settings.DB_CONFIG,
    )
    container = build_container(store=store)

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{settings.STORAGE_NAMESPACE}_{ts}.json"
    out_file.write_text(container.report_service.export_json(), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
