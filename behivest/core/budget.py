"""50/30/20 budget split."""

from behivest.core.validation import require_non_negative, round_half_up
from behivest.schemas.budget import BudgetAllocation

NEEDS_SHARE = 0.5
WANTS_SHARE = 0.3
SAVINGS_SHARE = 0.2


def calculate_budget_allocation(monthly_income: float) -> BudgetAllocation:
    """Split income into needs, wants and savings, each rounded to a whole unit."""
    require_non_negative(monthly_income=monthly_income)
    return BudgetAllocation(
        needs=round_half_up(monthly_income * NEEDS_SHARE),
        wants=round_half_up(monthly_income * WANTS_SHARE),
        savings=round_half_up(monthly_income * SAVINGS_SHARE),
    )
