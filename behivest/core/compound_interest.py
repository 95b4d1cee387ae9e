"""Compound interest with optional monthly contributions."""

from __future__ import annotations

import logging

from behivest.core.validation import require_non_negative, round_half_up
from behivest.schemas.compound_interest import CompoundInterestResult, YearData

logger = logging.getLogger(__name__)


def calculate_compound_interest(
    principal: float,
    annual_rate: float,
    years: int,
    monthly_contribution: float = 0.0,
) -> CompoundInterestResult:
    """Grow ``principal`` for ``years`` at ``annual_rate`` percent.

    Without a monthly contribution the balance compounds once a year. With one,
    it compounds monthly and the contribution is added after each month's
    interest, so deposit timing is reflected in the yearly snapshots.

    Raises InvalidArgumentError if any argument is negative.
    """
    require_non_negative(
        principal=principal,
        annual_rate=annual_rate,
        years=years,
        monthly_contribution=monthly_contribution,
    )

    breakdown: list[YearData] = []
    balance = float(principal)
    total_contributions = float(principal)

    if monthly_contribution == 0:
        growth = 1 + annual_rate / 100
        for year in range(1, int(years) + 1):
            balance *= growth
            breakdown.append(_snapshot(year, balance, total_contributions))
    else:
        monthly_rate = annual_rate / 100 / 12
        for year in range(1, int(years) + 1):
            for _ in range(12):
                balance = balance * (1 + monthly_rate) + monthly_contribution
                total_contributions += monthly_contribution
            breakdown.append(_snapshot(year, balance, total_contributions))

    final_amount = round_half_up(balance)
    contributions = round_half_up(total_contributions)
    logger.debug(
        "compound interest: principal=%s rate=%s years=%s monthly=%s -> %s",
        principal,
        annual_rate,
        years,
        monthly_contribution,
        final_amount,
    )
    return CompoundInterestResult(
        final_amount=final_amount,
        total_contributions=contributions,
        total_interest=final_amount - contributions,
        yearly_breakdown=breakdown,
    )


def _snapshot(year: int, balance: float, contributions: float) -> YearData:
    rounded_balance = round_half_up(balance)
    rounded_contributions = round_half_up(contributions)
    return YearData(
        year=year,
        balance=rounded_balance,
        contributions=rounded_contributions,
        interest=rounded_balance - rounded_contributions,
    )
