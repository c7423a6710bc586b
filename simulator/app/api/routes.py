"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from simulator.core.compounding import InvalidInputError, NumericOverflowError, simulate
from simulator.core.defaults import get_default_input
from simulator.core.formatting import summarize
from simulator.core.ping import get_ping_message
from simulator.schemas.ping import PingResponse
from simulator.schemas.simulation import SimulationInput, SimulationResult

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected simulation payload: %d error(s)", exc.error_count())
    return jsonify({"detail": exc.errors()}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InvalidInputError)
def _handle_invalid_input(exc: InvalidInputError):
    logger.warning("rejected simulation input: %s", exc)
    return jsonify({"detail": exc.errors}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(NumericOverflowError)
def _handle_overflow(exc: NumericOverflowError):
    logger.warning("simulation overflowed at month %d", exc.month)
    return jsonify({"detail": [str(exc)]}), HTTPStatus.UNPROCESSABLE_ENTITY


def _run_simulation() -> SimulationResult:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = SimulationInput.model_validate(raw_payload)
    return simulate(payload, max_months=current_app.config["MAX_MONTHS"])


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message())
    return jsonify(response.model_dump())


@api_bp.get("/simulation/defaults")
def simulation_defaults() -> Any:
    """Inputs the simulator starts from."""
    return jsonify(get_default_input().model_dump(mode="json"))


@api_bp.post("/simulation")
def simulation() -> Any:
    """Full month-by-month breakdown for the posted inputs."""
    result = _run_simulation()
    return jsonify(result.model_dump())


@api_bp.post("/simulation/summary")
def simulation_summary() -> Any:
    """Totals with their R$ formatting, without the breakdown."""
    result = _run_simulation()
    return jsonify(summarize(result).model_dump())
