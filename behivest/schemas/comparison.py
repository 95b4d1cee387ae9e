"""Data contracts for the investment vs savings comparison."""

from pydantic import Field

from behivest.schemas.common import CamelModel, ResultModel


class ComparisonRequest(CamelModel):
    """One principal projected under two annual rates."""

    initial_amount: float = Field(..., description="Amount to invest or save.")
    investment_rate: float = Field(
        ...,
        description="Expected annual investment return as a percentage.",
    )
    savings_rate: float = Field(
        ...,
        description="Savings account interest rate as a percentage.",
    )
    years: float = Field(..., description="Duration in years.")


class InvestmentComparison(ResultModel):
    investment_final_amount: int
    savings_final_amount: int
    difference: int
    investment_returns: float
    savings_interest: float
