from __future__ import annotations

import pytest
from pydantic import ValidationError

from backend.app import create_app
from backend.app.config import DEFAULT_CORS_ORIGINS, Settings


def test_defaults_without_environment():
    settings = Settings.from_env({})

    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.log_level == "INFO"
    assert settings.port == 5000


def test_environment_overrides():
    settings = Settings.from_env(
        {
            "CALC_CORS_ORIGINS": "https://calc.example.com, http://localhost:3000",
            "CALC_LOG_LEVEL": "debug",
            "CALC_PORT": "8080",
        }
    )

    assert settings.cors_origins == ["https://calc.example.com", "http://localhost:3000"]
    assert settings.log_level == "DEBUG"
    assert settings.port == 8080


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        Settings.from_env({"CALC_LOG_LEVEL": "chatty"})


def test_create_app_keeps_settings():
    settings = Settings(cors_origins=["https://calc.example.com"])
    app = create_app(settings)

    assert app.config["SETTINGS"] is settings


def test_cors_header_for_allowed_origin():
    app = create_app(Settings(cors_origins=["https://calc.example.com"]))

    with app.test_client() as client:
        resp = client.get("/api/ping", headers={"Origin": "https://calc.example.com"})

    assert resp.headers["Access-Control-Allow-Origin"] == "https://calc.example.com"
