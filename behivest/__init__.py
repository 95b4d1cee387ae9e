"""Financial calculators behind the Behivest tools pages."""

from behivest.core.budget import calculate_budget_allocation
from behivest.core.comparison import compare_investment_vs_savings
from behivest.core.compound_interest import calculate_compound_interest
from behivest.core.formatting import (
    format_currency,
    format_date,
    format_number,
    format_percentage,
)
from behivest.core.sip import calculate_sip
from behivest.core.validation import InvalidArgumentError

__all__ = [
    "InvalidArgumentError",
    "calculate_budget_allocation",
    "calculate_compound_interest",
    "calculate_sip",
    "compare_investment_vs_savings",
    "format_currency",
    "format_date",
    "format_number",
    "format_percentage",
]
