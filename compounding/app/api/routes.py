"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from compounding.core.examples import worked_examples
from compounding.core.health import get_ping
from compounding.core.projection import project_parameters, summarize
from compounding.domain.inputs import InputCardError, default_cards
from compounding.schemas.inputs import InputCardsResponse
from compounding.schemas.projection import ProjectionRequest, ProjectionResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected payload: %d validation error(s)", exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(InputCardError)
def _handle_input_card_error(exc: InputCardError):
    logger.warning("rejected input cards: %s", exc)
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(get_ping().model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Year-by-year compound vs simple projection plus summary metrics."""
    raw_payload = request.get_json(force=True, silent=True)
    if not isinstance(raw_payload, dict):
        logger.warning("rejected projection request: body is not a JSON object")
        return jsonify({"error": ["request body must be a JSON object"]}), HTTPStatus.BAD_REQUEST

    payload = ProjectionRequest.model_validate(raw_payload)
    params = payload.to_parameters()

    max_years = current_app.config["MAX_YEARS"]
    if params.years > max_years:
        logger.warning("horizon of %d years clamped to %d", params.years, max_years)
        params = params.model_copy(update={"years": max_years})

    snapshots = project_parameters(params)
    logger.info(
        "projection: %s years at %s%% -> %d snapshot(s)",
        params.years,
        params.interestRate,
        len(snapshots),
    )

    response = ProjectionResponse(
        parameters=params,
        snapshots=snapshots,
        summary=summarize(snapshots),
    )
    return jsonify(response.model_dump())


@api_bp.get("/examples")
def examples() -> Any:
    """Worked examples at the requested (or default) annual rate."""
    rate = request.args.get("rate", current_app.config["DEFAULT_RATE"])
    return jsonify(worked_examples(rate).model_dump())


@api_bp.get("/inputs/defaults")
def input_defaults() -> Any:
    """Initial state of the input form."""
    return jsonify(InputCardsResponse(inputs=default_cards()).model_dump())
