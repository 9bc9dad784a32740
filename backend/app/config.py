"""Runtime configuration read from the environment."""

from __future__ import annotations

import logging
import os
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


class Settings(BaseModel):
    cors_origins: List[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"
    port: int = Field(5000, ge=1, le=65535)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from CALC_* variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        values: dict = {}

        origins = env.get("CALC_CORS_ORIGINS")
        if origins:
            values["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]
        if env.get("CALC_LOG_LEVEL"):
            values["log_level"] = env["CALC_LOG_LEVEL"]
        if env.get("CALC_PORT"):
            values["port"] = env["CALC_PORT"]

        return cls.model_validate(values)
