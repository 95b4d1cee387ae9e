"""Data contracts for the systematic investment plan (SIP) calculator."""

from typing import List

from pydantic import Field

from behivest.schemas.common import CamelModel, ResultModel


class SIPRequest(CamelModel):
    """Inputs for a fixed monthly investment."""

    monthly_amount: float = Field(..., description="Amount invested every month.")
    annual_rate: float = Field(
        ...,
        description="Expected annual return as a percentage.",
    )
    years: float = Field(
        ...,
        description="Investment duration in years; fractions count whole months.",
    )


class MonthData(ResultModel):
    """Snapshot taken at a year boundary or at the final month."""

    month: int
    balance: int
    invested: float
    returns: int


class SIPResult(ResultModel):
    final_amount: int
    total_invested: float
    total_returns: int
    monthly_breakdown: List[MonthData]
