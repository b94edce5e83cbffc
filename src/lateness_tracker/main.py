from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import build_container, build_store
from .storage.repository import KeyValueStore

from .arrivals.controller import register as register_arrivals
from .classes.controller import register as register_classes
from .reports.controller import register as register_reports
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def create_app(store: Optional[KeyValueStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if store is None:
        store = build_store(
            getattr(settings, "STORAGE_BACKEND", "memory"),
            namespace=getattr(settings, "STORAGE_NAMESPACE", "lateness-tracker"),
            data_dir=getattr(settings, "DATA_DIR", "data"),
            db_config=getattr(settings, "DB_CONFIG", None),
            auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
        )
    logger.info("settings=%s store=%s namespace=%s", settings_module, type(store).__name__, store.namespace)

    container = build_container(
        store=store,
        csv_quote_fields=bool(getattr(settings, "CSV_QUOTE_FIELDS", False)),
    )
    app.extensions["lateness_tracker"] = container

    register_classes(app, container)
    register_students(app, container)
    register_arrivals(app, container)
    register_reports(app, container)

    return app
