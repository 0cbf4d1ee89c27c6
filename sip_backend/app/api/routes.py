"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from sip_backend.core.health import get_health_status
from sip_backend.core.sip import (
    InvalidArgument,
    calculate,
    calculate_required_sip,
    calculate_step_up_sip,
    get_year_wise_breakup,
)
from sip_backend.schemas.health import HealthResponse
from sip_backend.schemas.sip import (
    BreakupResponse,
    GoalInput,
    ProjectionInput,
    StepUpInput,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("malformed payload on %s: %d error(s)", request.path, exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InvalidArgument)
def _handle_invalid_argument(exc: InvalidArgument):
    logger.warning("rejected %s: %s", request.path, exc)
    return jsonify({"error": str(exc)}), HTTPStatus.BAD_REQUEST


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    response = HealthResponse.model_validate(get_health_status())
    return jsonify(response.model_dump())


@api_bp.post("/sip/calculate")
def sip_calculate() -> Any:
    """Future value of a flat monthly SIP."""
    payload = ProjectionInput.model_validate(_payload())
    result = calculate(
        payload.monthlyInvestment,
        payload.annualReturnRate,
        payload.timePeriod,
        payload.inflationRate,
    )
    return jsonify(result.model_dump())


@api_bp.post("/sip/goal")
def sip_goal() -> Any:
    """Monthly contribution required to reach a target amount."""
    payload = GoalInput.model_validate(_payload())
    result = calculate_required_sip(
        payload.targetAmount,
        payload.annualReturnRate,
        payload.timePeriod,
        payload.inflationRate,
    )
    return jsonify(result.model_dump())


@api_bp.post("/sip/step-up")
def sip_step_up() -> Any:
    payload = StepUpInput.model_validate(_payload())
    result = calculate_step_up_sip(
        payload.initialInvestment,
        payload.annualReturnRate,
        payload.timePeriod,
        payload.stepUpPercentage,
        payload.inflationRate,
    )
    return jsonify(result.model_dump())


@api_bp.post("/sip/breakup")
def sip_breakup() -> Any:
    """Year-by-year cumulative figures for charting."""
    payload = ProjectionInput.model_validate(_payload())
    records = get_year_wise_breakup(
        payload.monthlyInvestment,
        payload.annualReturnRate,
        payload.timePeriod,
        payload.inflationRate,
    )
    return jsonify(BreakupResponse(years=records).model_dump())
