"""Systematic investment plan: a fixed amount invested every month."""

from __future__ import annotations

import logging

from behivest.core.validation import require_non_negative, round_half_up
from behivest.schemas.sip import MonthData, SIPResult

logger = logging.getLogger(__name__)


def calculate_sip(monthly_amount: float, annual_rate: float, years: float) -> SIPResult:
    """Project monthly investments compounding monthly from a zero balance.

    A snapshot is recorded every twelve months and at the final month, so a
    horizon such as 2.5 years ends with a row for month 30.
    """
    require_non_negative(monthly_amount=monthly_amount, annual_rate=annual_rate, years=years)

    monthly_rate = annual_rate / 100 / 12
    months = int(years * 12)
    breakdown: list[MonthData] = []

    balance = 0.0
    for month in range(1, months + 1):
        balance = balance * (1 + monthly_rate) + monthly_amount
        if month % 12 == 0 or month == months:
            invested = monthly_amount * month
            rounded = round_half_up(balance)
            breakdown.append(
                MonthData(
                    month=month,
                    balance=rounded,
                    invested=invested,
                    returns=round_half_up(balance - invested),
                )
            )

    final_amount = round_half_up(balance)
    total_invested = monthly_amount * months
    logger.debug(
        "sip: monthly=%s rate=%s months=%s -> %s",
        monthly_amount,
        annual_rate,
        months,
        final_amount,
    )
    return SIPResult(
        final_amount=final_amount,
        total_invested=total_invested,
        total_returns=round_half_up(balance - total_invested),
        monthly_breakdown=breakdown,
    )
