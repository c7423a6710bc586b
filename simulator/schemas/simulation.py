"""Data contracts for compound interest simulations."""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class RateFrequency(str, Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"


class PeriodFrequency(str, Enum):
    MONTHS = "months"
    YEARS = "years"


class SimulationInput(BaseModel):
    """Inputs required to run a simulation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    initialValue: float = Field(..., ge=0, allow_inf_nan=False, description="Deposit at month 0.")
    monthlyContribution: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Contribution added at the end of every month.",
    )
    interestRate: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Interest rate in percent (e.g. 10 for 10%).",
    )
    rateFrequency: RateFrequency
    period: float = Field(..., ge=0, allow_inf_nan=False, description="Length of the horizon.")
    periodFrequency: PeriodFrequency


class MonthlyDataPoint(BaseModel):
    """State of the simulation at the end of a month (month 0 is the initial state)."""

    month: int = Field(..., ge=0)
    totalInvested: float
    totalInterest: float
    totalAmount: float


class SimulationResult(BaseModel):
    """Summary totals plus the month-by-month breakdown."""

    totalInvested: float
    totalInterest: float
    finalAmount: float
    monthlyBreakdown: List[MonthlyDataPoint]


class SimulationSummary(BaseModel):
    """Totals of a simulation, ready for the summary cards."""

    totalMonths: int = Field(..., ge=0)
    totalInvested: float
    totalInterest: float
    finalAmount: float
    formattedTotalInvested: str
    formattedTotalInterest: str
    formattedFinalAmount: str
