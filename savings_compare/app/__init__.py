"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from savings_compare.app.api.routes import api_bp
from savings_compare.config import Settings, settings as default_settings
from savings_compare.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    app = Flask(__name__)
    app.config.update(
        APP_NAME=settings.APP_NAME,
        APP_ENV=settings.APP_ENV,
        DEBUG=settings.DEBUG,
    )

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.CORS_ORIGINS}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("%s ready (env=%s)", settings.APP_NAME, settings.APP_ENV)
    return app
