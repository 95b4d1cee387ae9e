"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from behivest.core.budget import calculate_budget_allocation
from behivest.core.comparison import compare_investment_vs_savings
from behivest.core.compound_interest import calculate_compound_interest
from behivest.core.ping import get_ping_message
from behivest.core.sip import calculate_sip
from behivest.core.validation import InvalidArgumentError
from behivest.schemas.budget import BudgetRequest
from behivest.schemas.comparison import ComparisonRequest
from behivest.schemas.compound_interest import CompoundInterestRequest
from behivest.schemas.ping import PingResponse
from behivest.schemas.sip import SIPRequest

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("Rejected malformed calculator payload: %d error(s)", exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(InvalidArgumentError)
def _handle_invalid_argument(exc: InvalidArgumentError):
    """Negative amounts, rates or durations are a client error."""
    logger.info("Rejected calculator input: %s", exc)
    fields = [to_camel(name) for name in exc.fields]
    return jsonify({"detail": str(exc), "fields": fields}), HTTPStatus.BAD_REQUEST


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message())
    return jsonify(response.model_dump())


@api_bp.post("/calc/compound-interest")
def compound_interest() -> Any:
    payload = CompoundInterestRequest.model_validate(_payload())
    result = calculate_compound_interest(
        principal=payload.principal,
        annual_rate=payload.annual_rate,
        years=payload.years,
        monthly_contribution=payload.monthly_contribution,
    )
    return jsonify(result.model_dump(by_alias=True))


@api_bp.post("/calc/sip")
def sip() -> Any:
    payload = SIPRequest.model_validate(_payload())
    result = calculate_sip(
        monthly_amount=payload.monthly_amount,
        annual_rate=payload.annual_rate,
        years=payload.years,
    )
    return jsonify(result.model_dump(by_alias=True))


@api_bp.post("/calc/budget")
def budget() -> Any:
    payload = BudgetRequest.model_validate(_payload())
    result = calculate_budget_allocation(payload.monthly_income)
    return jsonify(result.model_dump(by_alias=True))


@api_bp.post("/calc/comparison")
def comparison() -> Any:
    """Investment vs savings account over the same horizon."""
    payload = ComparisonRequest.model_validate(_payload())
    result = compare_investment_vs_savings(
        initial_amount=payload.initial_amount,
        investment_rate=payload.investment_rate,
        savings_rate=payload.savings_rate,
        years=payload.years,
    )
    return jsonify(result.model_dump(by_alias=True))
