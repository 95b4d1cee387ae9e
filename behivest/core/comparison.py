"""Investment vs savings account comparison."""

from __future__ import annotations

import logging

from behivest.core.validation import require_non_negative, result_overflow, round_half_up
from behivest.schemas.comparison import InvestmentComparison

logger = logging.getLogger(__name__)


def _grow(amount: float, rate: float, years: float) -> int:
    try:
        factor = (1 + rate / 100) ** years
    except OverflowError as exc:
        raise result_overflow() from exc
    return round_half_up(amount * factor)


def compare_investment_vs_savings(
    initial_amount: float,
    investment_rate: float,
    savings_rate: float,
    years: float,
) -> InvestmentComparison:
    """Compound the same principal annually under both rates.

    There are no periodic deposits, so both paths use the closed form
    ``amount * (1 + rate/100) ** years``.
    """
    require_non_negative(
        initial_amount=initial_amount,
        investment_rate=investment_rate,
        savings_rate=savings_rate,
        years=years,
    )

    investment_final = _grow(initial_amount, investment_rate, years)
    savings_final = _grow(initial_amount, savings_rate, years)
    logger.debug(
        "comparison: amount=%s investment=%s savings=%s years=%s -> %s vs %s",
        initial_amount,
        investment_rate,
        savings_rate,
        years,
        investment_final,
        savings_final,
    )
    return InvestmentComparison(
        investment_final_amount=investment_final,
        savings_final_amount=savings_final,
        difference=investment_final - savings_final,
        investment_returns=investment_final - initial_amount,
        savings_interest=savings_final - initial_amount,
    )
