"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from investcalc.app.api.routes import api_bp
from investcalc.config import Config
from investcalc.database import ParamsStore


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    level = app.config["LOG_LEVEL"]
    app.logger.setLevel(level)
    logging.getLogger("investcalc").setLevel(level)

    origins = [origin.strip() for origin in app.config["CORS_ORIGINS"].split(",") if origin.strip()]
    CORS(
        app,
        resources={r"/api/*": {"origins": origins}},
        supports_credentials=True,
    )

    app.extensions["params_store"] = ParamsStore(
        app.config["PARAMS_DB_PATH"],
        storage_key=app.config["STORAGE_KEY"],
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
