"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from savings_compare.core.comparison import build_comparison_table, difference_series
from savings_compare.core.logging import get_logger
from savings_compare.core.ping import build_ping
from savings_compare.core.projection import project
from savings_compare.schemas.projection import ComparisonResponse, ProjectionInput

logger = get_logger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into field-level JSON messages."""
    errors = exc.errors(include_url=False, include_context=False)
    logger.warning("rejected projection input: %d invalid field(s)", len(errors))
    return jsonify({"detail": errors}), HTTPStatus.UNPROCESSABLE_ENTITY


def _read_inputs() -> ProjectionInput:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    return ProjectionInput.model_validate(raw_payload)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = build_ping(current_app.config["APP_NAME"])
    return jsonify(response.model_dump())


@api_bp.get("/calc/defaults")
def defaults() -> Any:
    """Inputs the calculator starts from (and returns to on reset)."""
    return jsonify(ProjectionInput.defaults().model_dump(mode="json"))


@api_bp.post("/calc/projection")
def projection() -> Any:
    inputs = _read_inputs()
    result = project(inputs)
    logger.info(
        "projection term=%d months verdict=%s difference=%.2f",
        inputs.termMonths,
        result.betterOption.value,
        result.difference,
    )
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/calc/comparison")
def comparison() -> Any:
    """Checkpoint table and month-by-month differences for a projection."""
    inputs = _read_inputs()
    result = project(inputs)
    response = ComparisonResponse(
        checkpoints=build_comparison_table(result),
        differences=difference_series(result),
    )
    return jsonify(response.model_dump(mode="json"))
