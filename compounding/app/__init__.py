"""Application factory and app-wide configuration."""

import logging
import sys
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from compounding import config
from compounding.app.api.routes import api_bp


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name, logging.INFO)
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            stream=sys.stdout,
        )
    logging.getLogger("compounding").setLevel(level)


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.update(
        CORS_ORIGINS=config.CORS_ORIGINS,
        LOG_LEVEL=config.LOG_LEVEL,
        DEFAULT_RATE=config.DEFAULT_RATE,
        MAX_YEARS=config.MAX_YEARS,
    )
    if overrides:
        app.config.update(overrides)

    _configure_logging(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
