"""Application factory and app-wide configuration."""

import logging
import os
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from simulator.app.api.routes import api_bp

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance; ``config`` overrides the environment."""
    app = Flask(__name__)

    app.config.from_mapping(
        CORS_ORIGINS=_split_origins(os.getenv("SIMULATOR_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)),
        MAX_MONTHS=int(os.getenv("SIMULATOR_MAX_MONTHS", "12000")),
        LOG_LEVEL=(os.getenv("SIMULATOR_LOG_LEVEL") or "INFO").strip().upper(),
    )
    if config:
        app.config.update(config)

    if not isinstance(logging.getLevelName(app.config["LOG_LEVEL"]), int):
        raise ValueError(
            f"SIMULATOR_LOG_LEVEL must be a logging level name, got {app.config['LOG_LEVEL']!r}"
        )
    logging.basicConfig(level=app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
