from __future__ import annotations

import pytest

from behivest.core.compound_interest import calculate_compound_interest
from behivest.core.validation import InvalidArgumentError


def test_lump_sum_compounds_annually():
    result = calculate_compound_interest(10_000_000, 10, 5, 0)

    assert result.final_amount == 16_105_100
    assert result.total_contributions == 10_000_000
    assert result.total_interest == 6_105_100
    assert len(result.yearly_breakdown) == 5
    assert [row.balance for row in result.yearly_breakdown] == [
        11_000_000,
        12_100_000,
        13_310_000,
        14_641_000,
        16_105_100,
    ]


def test_lump_sum_contributions_stay_at_principal():
    result = calculate_compound_interest(10_000_000, 10, 3)

    assert all(row.contributions == 10_000_000 for row in result.yearly_breakdown)
    assert result.yearly_breakdown[0].interest == 1_000_000


def test_monthly_contributions_compound_monthly():
    result = calculate_compound_interest(10_000_000, 10, 10, 1_000_000)

    assert result.total_contributions == 10_000_000 + 1_000_000 * 12 * 10
    assert result.final_amount > result.total_contributions
    assert result.total_interest > 0
    assert len(result.yearly_breakdown) == 10


def test_monthly_first_year_matches_hand_computation():
    """One year at 12%/yr: 1% per month, contribution added after interest."""
    balance = 1_000_000.0
    for _ in range(12):
        balance = balance * 1.01 + 100_000

    result = calculate_compound_interest(1_000_000, 12, 1, 100_000)

    assert result.final_amount == round(balance)
    assert result.yearly_breakdown[0].contributions == 2_200_000


def test_zero_rate_keeps_principal():
    result = calculate_compound_interest(10_000_000, 0, 5, 0)

    assert result.final_amount == 10_000_000
    assert result.total_interest == 0


def test_zero_years_returns_principal_and_empty_breakdown():
    result = calculate_compound_interest(10_000_000, 10, 0, 0)

    assert result.final_amount == 10_000_000
    assert result.total_contributions == 10_000_000
    assert result.yearly_breakdown == []


@pytest.mark.parametrize(
    "args",
    [
        (-10_000_000, 10, 5, 0),
        (10_000_000, -10, 5, 0),
        (10_000_000, 10, -5, 0),
        (10_000_000, 10, 5, -1_000_000),
    ],
)
def test_negative_values_rejected(args):
    with pytest.raises(InvalidArgumentError):
        calculate_compound_interest(*args)


def test_error_names_negative_fields():
    with pytest.raises(InvalidArgumentError) as excinfo:
        calculate_compound_interest(-1, 10, -2)

    assert excinfo.value.fields == ["principal", "years"]


def test_breakdown_structure():
    result = calculate_compound_interest(10_000_000, 10, 3, 500_000)

    for index, year in enumerate(result.yearly_breakdown):
        assert year.year == index + 1
        assert year.balance > 0
        assert year.contributions > 0
        assert year.interest >= 0
        assert year.interest == year.balance - year.contributions


def test_totals_are_whole_numbers():
    result = calculate_compound_interest(10_000_000, 7.5, 5, 500_000)

    assert isinstance(result.final_amount, int)
    assert isinstance(result.total_contributions, int)
    assert result.total_interest == result.final_amount - result.total_contributions


def test_long_horizon():
    result = calculate_compound_interest(1_000_000, 10, 50, 0)

    assert result.final_amount > 1_000_000
    assert len(result.yearly_breakdown) == 50


def test_repeated_calls_are_identical():
    first = calculate_compound_interest(12_345_678, 6.8, 12, 250_000)
    second = calculate_compound_interest(12_345_678, 6.8, 12, 250_000)

    assert first == second


def test_runaway_growth_is_rejected():
    with pytest.raises(InvalidArgumentError) as excinfo:
        calculate_compound_interest(1, 12, 10_000)

    assert "too large" in str(excinfo.value)


@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_non_finite_principal_rejected(value):
    with pytest.raises(InvalidArgumentError) as excinfo:
        calculate_compound_interest(value, 10, 5)

    assert excinfo.value.fields == ["principal"]
