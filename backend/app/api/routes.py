"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any

from flask import Blueprint, jsonify, request

from backend.core.errors import InvalidInput, InvalidRate
from backend.core.projection import project_payload

LOGGER = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(InvalidInput)
def _handle_invalid_input(exc: InvalidInput):
    """Report every rejected field at once."""
    LOGGER.warning("Rejected projection input: %s", exc)
    return jsonify({"detail": exc.errors}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(InvalidRate)
def _handle_invalid_rate(exc: InvalidRate):
    LOGGER.warning("Rejected projection rate %r", exc.rate)
    return jsonify({"detail": [str(exc)]}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify({"message": "pong"})


@api_bp.post("/calc/compound-interest")
def compound_interest() -> Any:
    """Project base, max and zero-rate growth for one investment."""
    raw_payload = request.get_json(force=True, silent=False)
    result = project_payload(raw_payload)
    LOGGER.info(
        "Projected %d scenarios across %d points",
        len(result.scenarios),
        len(result.series),
    )
    return jsonify(result.model_dump(mode="json", by_alias=True))
