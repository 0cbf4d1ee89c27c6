"""Data contracts for SIP projections.

Field names are camelCase so that ``model_dump()`` matches the JSON the
frontend charts consume.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# ints stay ints so integer periods echo back as 120, not 120.0
Number = Union[int, float]


class ProjectionInput(BaseModel):
    """Inputs for a forward projection (also used by the year-wise breakup)."""

    model_config = ConfigDict(extra="forbid", strict=True)

    monthlyInvestment: Number = Field(..., description="Amount contributed at the start of every month.")
    annualReturnRate: Number = Field(
        ...,
        description="Expected annual return as a percentage (e.g. 12 for 12%).",
    )
    timePeriod: Number = Field(..., description="Investment horizon in years.")
    inflationRate: Number = Field(0, description="Annual inflation as a percentage.")


class GoalInput(BaseModel):
    """Inputs for the required-contribution (goal) calculation."""

    model_config = ConfigDict(extra="forbid", strict=True)

    targetAmount: Number = Field(..., description="Future value to reach at the end of the horizon.")
    annualReturnRate: Number
    timePeriod: Number
    inflationRate: Number = 0


class StepUpInput(BaseModel):
    """Inputs for a projection whose contribution grows every anniversary."""

    model_config = ConfigDict(extra="forbid", strict=True)

    initialInvestment: Number = Field(..., description="Monthly contribution during the first year.")
    annualReturnRate: Number
    timePeriod: Number
    stepUpPercentage: Number = Field(..., description="Yearly increase of the contribution, in percent.")
    inflationRate: Number = 0


class ProjectionResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    monthlyInvestment: Number
    timePeriod: Number
    annualReturnRate: Number
    inflationRate: Number
    # plain subtraction, not the Fisher relation
    realAnnualReturnRate: Number
    totalInvested: int
    estimatedReturns: int
    futureValue: int
    inflationAdjustedFutureValue: int
    inflationAdjustedEstimatedReturns: int
    totalMonths: Number


class GoalResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    targetAmount: Number
    timePeriod: Number
    annualReturnRate: Number
    inflationRate: Number
    realAnnualReturnRate: Number
    requiredMonthlyInvestment: int
    # None when the real return wipes out the capital (real rate <= -100%)
    requiredMonthlyInvestmentReal: Optional[int]
    totalMonths: Number


class StepUpResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    initialInvestment: Number
    timePeriod: Number
    annualReturnRate: Number
    stepUpPercentage: Number
    inflationRate: Number
    totalInvested: int
    estimatedReturns: int
    futureValue: int
    inflationAdjustedFutureValue: int
    inflationAdjustedEstimatedReturns: int


class YearRecord(BaseModel):
    """Cumulative position at the end of one year of a flat SIP."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(..., ge=1)
    invested: int
    value: int
    returns: int
    inflationAdjustedValue: int
    inflationAdjustedReturns: int


class BreakupResponse(BaseModel):
    """Year-wise breakup wrapped for the HTTP API."""

    years: List[YearRecord]
