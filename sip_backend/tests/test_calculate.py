from __future__ import annotations

from math import isclose

import pytest
from pydantic import ValidationError

from sip_backend.core.sip import (
    MAX_TIME_PERIOD,
    InvalidArgument,
    _round_half_up,
    annuity_due_factor,
    calculate,
)


def test_basic_sip_matches_annuity_due_formula():
    """
    5,000/month at 12% for 10 years: 120 contributions compounding at 1% a month.
    """
    result = calculate(5000, 12, 10)

    expected = 5000 * ((1.01**120 - 1) / 0.01) * 1.01
    assert result.totalInvested == 600000
    assert result.futureValue == _round_half_up(expected)
    assert abs(result.futureValue - 1161695) <= 1
    assert result.estimatedReturns == result.futureValue - result.totalInvested
    assert result.totalMonths == 120
    assert isinstance(result.totalMonths, int)


def test_zero_inflation_leaves_values_unadjusted():
    result = calculate(5000, 12, 10)

    assert result.inflationRate == 0
    assert result.realAnnualReturnRate == 12
    assert result.inflationAdjustedFutureValue == result.futureValue
    assert result.inflationAdjustedEstimatedReturns == result.estimatedReturns


def test_inflation_discounts_future_value():
    result = calculate(5000, 12, 10, inflation_rate=6)

    raw_future_value = 5000 * annuity_due_factor(0.01, 120)
    assert result.inflationAdjustedFutureValue == _round_half_up(raw_future_value / 1.06**10)
    assert result.inflationAdjustedFutureValue < result.futureValue
    assert abs(
        result.inflationAdjustedEstimatedReturns
        - (result.inflationAdjustedFutureValue - result.totalInvested)
    ) <= 1
    # simple subtraction, not (1.12 / 1.06) - 1
    assert isclose(result.realAnnualReturnRate, 6.0)


def test_high_inflation_can_make_real_returns_negative():
    result = calculate(1000, 4, 20, inflation_rate=10)

    assert result.estimatedReturns > 0
    assert result.inflationAdjustedEstimatedReturns < 0


@pytest.mark.parametrize(
    "monthly, rate, years",
    [(1000, 8, 5), (2500.5, 10.5, 7), (10000, 15, 30), (100, 1, 1)],
)
def test_future_value_is_invested_plus_returns(monthly, rate, years):
    result = calculate(monthly, rate, years)

    assert abs(result.futureValue - (result.totalInvested + result.estimatedReturns)) <= 1
    assert result.futureValue > result.totalInvested > 0


def test_higher_rate_increases_future_value():
    values = [calculate(5000, rate, 10).futureValue for rate in (4, 8, 12, 16)]

    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_longer_period_increases_invested_and_value():
    results = [calculate(5000, 12, years) for years in (1, 5, 10, 20)]

    for shorter, longer in zip(results, results[1:]):
        assert longer.totalInvested > shorter.totalInvested
        assert longer.futureValue > shorter.futureValue


def test_results_are_frozen():
    result = calculate(5000, 12, 10)

    with pytest.raises(ValidationError):
        result.futureValue = 0


@pytest.mark.parametrize(
    "args",
    [
        (-1000, 12, 10),
        (0, 12, 10),
        (5000, -1, 10),
        (5000, 0, 10),
        (5000, 12, 0),
        (5000, 12, -3),
        (5000, 12, 10, -1),
        (float("nan"), 12, 10),
        (5000, float("inf"), 10),
        (True, 12, 10),
        ("5000", 12, 10),
    ],
)
def test_invalid_arguments_are_rejected(args):
    with pytest.raises(InvalidArgument):
        calculate(*args)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError, match="positive"):
        calculate(5000, 12, 0)


@pytest.mark.parametrize(
    "value, expected",
    [
        (2.5, 3),
        (2.4999, 2),
        (-2.5, -2),
        (-2.6, -3),
        (-0.5, 0),
        (0.0, 0),
        (0.49999999999999994, 0),
        (1161695.38, 1161695),
    ],
)
def test_rounding_is_half_up(value, expected):
    assert _round_half_up(value) == expected


def test_fractional_period_keeps_float_months():
    result = calculate(1000, 12, 2.5)

    assert result.totalMonths == 30.0
    assert result.totalInvested == 30000


@pytest.mark.parametrize(
    "args",
    [
        (5000, 1000, 100),
        (5000, 12, 10, 1e300),
        (1e300, 12, 100),
    ],
)
def test_overflowing_results_are_rejected(args):
    """
    Inputs that pass the range checks but overflow a float are reported as invalid, not crashed on.
    """
    with pytest.raises(InvalidArgument, match="too large"):
        calculate(*args)


def test_period_above_limit_is_rejected():
    assert calculate(100, 1, MAX_TIME_PERIOD).totalMonths == MAX_TIME_PERIOD * 12

    with pytest.raises(InvalidArgument, match="cannot exceed"):
        calculate(100, 1, MAX_TIME_PERIOD + 1)
