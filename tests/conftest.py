from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from savings_compare.app import create_app
from savings_compare.config import Settings


@pytest.fixture()
def app() -> Flask:
    flask_app = create_app(Settings(APP_NAME="savings-compare-test", LOG_LEVEL="WARNING"))
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
