from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_JWT_ALGORITHM, DEFAULT_TOKEN_EXPIRATION_SECONDS
from .database.bootstrap import apply_schema, ensure_demo_users, list_tables
from .products.controller import register as register_products
from .security.filter import register_security
from .security.jwt_generator import JwtGenerator
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def build_jwt_generator(settings) -> JwtGenerator:
    return JwtGenerator(
        str(getattr(settings, "JWT_SECRET", "") or ""),
        algorithm=getattr(settings, "JWT_ALGORITHM", DEFAULT_JWT_ALGORITHM),
        expiration_seconds=int(getattr(settings, "JWT_EXPIRATION_SECONDS", DEFAULT_TOKEN_EXPIRATION_SECONDS)),
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    # keep field order of the page payload
    app.json.sort_keys = False

    if container is None:
        # Fails fast on a missing or short JWT_SECRET, before touching the database.
        jwt_generator = build_jwt_generator(settings)
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%s)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            ensure_demo_users(db_config)

        container = build_container(db_config=db_config, jwt_generator=jwt_generator)

    app.extensions["container"] = container

    register_security(app, container.jwt_generator)
    register_users(app, container)
    register_products(app, container)

    return app
