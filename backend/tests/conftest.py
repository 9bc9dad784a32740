from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from backend.app import create_app
from backend.app.config import Settings


@pytest.fixture()
def app() -> Flask:
    flask_app = create_app(Settings())
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def payload() -> dict:
    return {
        "principal": 100000,
        "monthlyContribution": 5000,
        "annualRate": 0.08,
        "years": 10,
        "varianceRate": 0.02,
    }
