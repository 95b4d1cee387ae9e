"""Data contracts for the 50/30/20 budget allocator."""

from pydantic import Field

from behivest.schemas.common import CamelModel, ResultModel


class BudgetRequest(CamelModel):
    monthly_income: float = Field(..., description="Monthly after-tax income.")


class BudgetAllocation(ResultModel):
    needs: int
    wants: int
    savings: int
