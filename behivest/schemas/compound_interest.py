"""Data contracts for the compound interest calculator."""

from typing import List

from pydantic import Field

from behivest.schemas.common import CamelModel, ResultModel


class CompoundInterestRequest(CamelModel):
    """Inputs for a lump sum with optional monthly top-ups."""

    principal: float = Field(..., description="Initial investment amount.")
    annual_rate: float = Field(
        ...,
        description="Annual interest rate as a percentage (e.g. 10 for 10%).",
    )
    years: int = Field(..., description="Investment duration in whole years.")
    monthly_contribution: float = Field(
        0.0,
        description="Amount added at the end of every month.",
    )


class YearData(ResultModel):
    """Balance snapshot at the end of one year."""

    year: int
    balance: int
    contributions: int
    interest: int


class CompoundInterestResult(ResultModel):
    final_amount: int
    total_contributions: int
    total_interest: int
    yearly_breakdown: List[YearData]
