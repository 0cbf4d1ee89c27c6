"""SIP projection engine.

Every function here is pure: inputs are validated up front, the arithmetic
runs at full float precision and monetary fields are rounded only when the
result model is built.
"""

from __future__ import annotations

import logging
import math
from typing import List

from sip_backend.schemas.sip import (
    GoalResult,
    ProjectionResult,
    StepUpResult,
    YearRecord,
)

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
MAX_TIME_PERIOD = 1000


class InvalidArgument(ValueError):
    """Raised when a numeric input violates its precondition."""


def _round_half_up(value: float) -> int:
    # same result as JS Math.round, without the error of floor(value + 0.5)
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def _finite(name: str, value: float) -> float:
    if not math.isfinite(value):
        logger.debug("%s overflowed", name)
        raise InvalidArgument(f"{name} result is too large to represent")
    return value


def _compound(rate: float, periods: float) -> float:
    """``(1 + rate) ** periods``, raising InvalidArgument instead of overflowing."""
    try:
        growth = (1 + rate) ** periods
    except OverflowError:
        logger.debug("growth (1 + %r) ** %r overflowed", rate, periods)
        raise InvalidArgument("growth result is too large to represent") from None
    return _finite("growth", growth)


def _require_number(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgument(f"{name} must be a number")
    if not math.isfinite(value):
        raise InvalidArgument(f"{name} must be a finite number")


def _require_positive(name: str, value: float) -> None:
    _require_number(name, value)
    if value <= 0:
        logger.debug("rejected %s=%r: not positive", name, value)
        raise InvalidArgument(f"{name} must be a positive number")


def _require_non_negative(name: str, value: float) -> None:
    _require_number(name, value)
    if value < 0:
        logger.debug("rejected %s=%r: negative", name, value)
        raise InvalidArgument(f"{name} cannot be negative")


def _validate(amount_name: str, amount: float, annual_return_rate: float, time_period: float, inflation_rate: float) -> None:
    _require_positive(amount_name, amount)
    _require_positive("annual_return_rate", annual_return_rate)
    _require_positive("time_period", time_period)
    if time_period > MAX_TIME_PERIOD:
        raise InvalidArgument(f"time_period cannot exceed {MAX_TIME_PERIOD} years")
    _require_non_negative("inflation_rate", inflation_rate)


def monthly_rate(annual_rate_pct: float) -> float:
    """Convert an annual percentage into a monthly decimal rate."""
    return annual_rate_pct / MONTHS_PER_YEAR / 100


def annuity_due_factor(rate: float, months: float) -> float:
    """Future value of 1 paid at the start of each of ``months`` periods.

    ``rate`` must be non-zero; callers handle the flat case themselves.
    """
    return _finite("growth", (_compound(rate, months) - 1) / rate * (1 + rate))


def inflation_adjust(value: float, inflation_rate: float, years: float) -> float:
    """Discount ``value`` to today's money; zero inflation leaves it unchanged."""
    if inflation_rate > 0:
        return value / _compound(inflation_rate / 100, years)
    return value


def calculate(
    monthly_investment: float,
    annual_return_rate: float,
    time_period: float,
    inflation_rate: float = 0,
) -> ProjectionResult:
    """Project the future value of a flat monthly SIP.

    Contributions are made at the start of each month (annuity-due) and
    compound monthly at ``annual_return_rate / 12``.

    Raises:
        InvalidArgument: if the investment, rate or period is not positive,
            the inflation rate is negative, or a result overflows a float.
    """
    _validate("monthly_investment", monthly_investment, annual_return_rate, time_period, inflation_rate)

    rate = monthly_rate(annual_return_rate)
    months = time_period * MONTHS_PER_YEAR

    future_value = _finite("future_value", monthly_investment * annuity_due_factor(rate, months))
    total_invested = _finite("total_invested", monthly_investment * months)
    estimated_returns = future_value - total_invested

    adjusted_value = inflation_adjust(future_value, inflation_rate, time_period)
    adjusted_returns = adjusted_value - total_invested

    logger.debug(
        "sip %s/month @ %s%% for %s years -> %.2f",
        monthly_investment,
        annual_return_rate,
        time_period,
        future_value,
    )

    return ProjectionResult(
        monthlyInvestment=monthly_investment,
        timePeriod=time_period,
        annualReturnRate=annual_return_rate,
        inflationRate=inflation_rate,
        realAnnualReturnRate=annual_return_rate - inflation_rate,
        totalInvested=_round_half_up(total_invested),
        estimatedReturns=_round_half_up(estimated_returns),
        futureValue=_round_half_up(future_value),
        inflationAdjustedFutureValue=_round_half_up(adjusted_value),
        inflationAdjustedEstimatedReturns=_round_half_up(adjusted_returns),
        totalMonths=months,
    )


def calculate_required_sip(
    target_amount: float,
    annual_return_rate: float,
    time_period: float,
    inflation_rate: float = 0,
) -> GoalResult:
    """Monthly contribution needed to reach ``target_amount``.

    The nominal figure inverts :func:`calculate`. The real figure uses the
    return net of inflation; it is ``None`` when that real rate is -100% or
    worse, because no contribution can reach the goal.
    """
    _validate("target_amount", target_amount, annual_return_rate, time_period, inflation_rate)

    months = time_period * MONTHS_PER_YEAR
    factor = annuity_due_factor(monthly_rate(annual_return_rate), months)
    required = _finite("required_monthly_investment", target_amount / factor)

    real_rate = annual_return_rate - inflation_rate
    real_monthly = monthly_rate(real_rate)

    if real_monthly == 0:
        required_real = _finite("required_monthly_investment_real", target_amount / months)
    elif real_rate <= -100:
        logger.debug("real rate %s%% leaves no finite contribution for the goal", real_rate)
        required_real = None
    else:
        required_real = _finite(
            "required_monthly_investment_real",
            target_amount / annuity_due_factor(real_monthly, months),
        )

    return GoalResult(
        targetAmount=target_amount,
        timePeriod=time_period,
        annualReturnRate=annual_return_rate,
        inflationRate=inflation_rate,
        realAnnualReturnRate=real_rate,
        requiredMonthlyInvestment=_round_half_up(required),
        requiredMonthlyInvestmentReal=None if required_real is None else _round_half_up(required_real),
        totalMonths=months,
    )


def calculate_step_up_sip(
    initial_investment: float,
    annual_return_rate: float,
    time_period: float,
    step_up_percentage: float,
    inflation_rate: float = 0,
) -> StepUpResult:
    """Project a SIP whose contribution rises by ``step_up_percentage`` each year.

    Each monthly contribution compounds from the month it is made to the end
    of the horizon. The increase is applied after every twelfth contribution.
    """
    _validate("initial_investment", initial_investment, annual_return_rate, time_period, inflation_rate)
    _require_non_negative("step_up_percentage", step_up_percentage)

    rate = monthly_rate(annual_return_rate)
    future_value = 0.0
    total_invested = 0.0
    contribution = initial_investment

    for year in range(1, math.floor(time_period) + 1):
        for month in range(1, MONTHS_PER_YEAR + 1):
            remaining = (time_period - year) * MONTHS_PER_YEAR + (MONTHS_PER_YEAR - month + 1)
            future_value += contribution * _compound(rate, remaining)
            total_invested += contribution
        contribution *= 1 + step_up_percentage / 100

    future_value = _finite("future_value", future_value)
    total_invested = _finite("total_invested", total_invested)
    estimated_returns = future_value - total_invested
    adjusted_value = inflation_adjust(future_value, inflation_rate, time_period)
    adjusted_returns = adjusted_value - total_invested

    logger.debug(
        "step-up sip %s/month +%s%%/year @ %s%% for %s years -> %.2f",
        initial_investment,
        step_up_percentage,
        annual_return_rate,
        time_period,
        future_value,
    )

    return StepUpResult(
        initialInvestment=initial_investment,
        timePeriod=time_period,
        annualReturnRate=annual_return_rate,
        stepUpPercentage=step_up_percentage,
        inflationRate=inflation_rate,
        totalInvested=_round_half_up(total_invested),
        estimatedReturns=_round_half_up(estimated_returns),
        futureValue=_round_half_up(future_value),
        inflationAdjustedFutureValue=_round_half_up(adjusted_value),
        inflationAdjustedEstimatedReturns=_round_half_up(adjusted_returns),
    )


def get_year_wise_breakup(
    monthly_investment: float,
    annual_return_rate: float,
    time_period: float,
    inflation_rate: float = 0,
) -> List[YearRecord]:
    """Cumulative invested/value/returns at the end of each whole year."""
    _validate("monthly_investment", monthly_investment, annual_return_rate, time_period, inflation_rate)

    breakup: List[YearRecord] = []
    for year in range(1, math.floor(time_period) + 1):
        result = calculate(monthly_investment, annual_return_rate, year, inflation_rate)
        breakup.append(
            YearRecord(
                year=year,
                invested=result.totalInvested,
                value=result.futureValue,
                returns=result.estimatedReturns,
                inflationAdjustedValue=result.inflationAdjustedFutureValue,
                inflationAdjustedReturns=result.inflationAdjustedEstimatedReturns,
            )
        )
    return breakup
