from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig, DatabaseConnection

from .container import Container, build_container
from .media.controller import register as register_media
from .reconciliation.controller import register as register_reconciliation
from .records.controller import register as register_records

logger = logging.getLogger(__name__)


def create_app(*, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    store_backend = getattr(settings, "STORE_BACKEND", "file")
    db_config = getattr(settings, "DB_CONFIG", None)

    if container is None:
        if store_backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            conn_factory = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(conn_factory, schema_path=schema_path)
            logger.info("schema ready (tables=%d)", len(list_tables(conn_factory)))

        container = build_container(
            store_backend=store_backend,
            db_config=db_config,
            store_dir=getattr(settings, "STORE_DIR", "instance/store"),
            media_upload_dir=getattr(settings, "MEDIA_UPLOAD_DIR", None),
            media_base_url=getattr(settings, "MEDIA_BASE_URL", "/media"),
        )

    if app.config["DEBUG"]:
        logger.info("settings=%s store=%s", settings_module, type(container.kv_store).__name__)

    register_reconciliation(app, container)
    register_records(app, container)
    register_media(app, container)

    return app
