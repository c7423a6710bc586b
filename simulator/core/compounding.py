"""Month-by-month compound interest with recurring contributions."""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import List, Optional, Union

from simulator.schemas.simulation import (
    MonthlyDataPoint,
    PeriodFrequency,
    RateFrequency,
    SimulationInput,
    SimulationResult,
)

logger = logging.getLogger(__name__)

_CENT = Decimal("0.01")
# wide enough to quantize any finite double to cents
_CENT_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


class InvalidInputError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class NumericOverflowError(ArithmeticError):
    """The running balance left the range of a double."""

    def __init__(self, month: int):
        super().__init__(f"balance is no longer finite at month {month}")
        self.month = month


def round_cents(value: float) -> float:
    """Round to two decimals, ties away from zero, on the exact binary value."""
    return float(Decimal(value).quantize(_CENT, context=_CENT_CONTEXT))


def _validate(
    initial_value: float,
    monthly_contribution: float,
    interest_rate: float,
    rate_frequency: Union[RateFrequency, str],
    period: float,
    period_frequency: Union[PeriodFrequency, str],
    max_months: Optional[int],
) -> tuple[RateFrequency, PeriodFrequency]:
    errors: List[str] = []

    for name, value in (
        ("initialValue", initial_value),
        ("monthlyContribution", monthly_contribution),
        ("interestRate", interest_rate),
        ("period", period),
    ):
        if not math.isfinite(value):
            errors.append(f"{name} must be a finite number")
        elif value < 0:
            errors.append(f"{name} must not be negative")

    rate_freq = period_freq = None
    try:
        rate_freq = RateFrequency(rate_frequency)
    except ValueError:
        errors.append(f"rateFrequency must be one of {[f.value for f in RateFrequency]}")
    try:
        period_freq = PeriodFrequency(period_frequency)
    except ValueError:
        errors.append(f"periodFrequency must be one of {[f.value for f in PeriodFrequency]}")

    if not errors:
        months = period * 12 if period_freq == PeriodFrequency.YEARS else period
        if not math.isfinite(months):
            errors.append("period is too long")
        elif max_months is not None and months >= max_months + 1:
            errors.append(f"horizon must not exceed {max_months} months")

    if errors:
        raise InvalidInputError(errors)
    return rate_freq, period_freq


def total_months_for(period: float, period_frequency: Union[PeriodFrequency, str]) -> int:
    """Whole months covered by the horizon; fractional months are floored."""
    months = period * 12 if PeriodFrequency(period_frequency) == PeriodFrequency.YEARS else period
    if not math.isfinite(months):
        raise InvalidInputError(["period is too long"])
    if months < 0:
        raise InvalidInputError(["period must not be negative"])
    return math.floor(months)


def monthly_rate_for(interest_rate: float, rate_frequency: Union[RateFrequency, str]) -> float:
    """
    Per-month rate as a decimal.

    A yearly rate is converted to the equivalent effective monthly rate,
    (1 + r) ** (1 / 12) - 1, not r / 12.
    """
    if interest_rate == 0:
        return 0.0
    rate = interest_rate / 100
    if RateFrequency(rate_frequency) == RateFrequency.YEARLY:
        return (1 + rate) ** (1 / 12) - 1
    return rate


def calculate_compound_interest(
    initial_value: float,
    monthly_contribution: float,
    interest_rate: float,
    rate_frequency: Union[RateFrequency, str],
    period: float,
    period_frequency: Union[PeriodFrequency, str],
    max_months: Optional[int] = None,
) -> SimulationResult:
    """
    Build the monthly breakdown starting from month 0.

    Inputs are checked before anything is computed; ``max_months`` optionally
    caps the horizon (after flooring to whole months).

    Order of operations (per month):
      1) Interest accrues on the previous month's balance.
      2) The month's contribution is added after the interest.
      3) Record the point with each field rounded to cents. Interest is taken
         from the unrounded running totals, not from the rounded fields.

    The summary totals are left unrounded.
    """
    rate_freq, period_freq = _validate(
        initial_value,
        monthly_contribution,
        interest_rate,
        rate_frequency,
        period,
        period_frequency,
        max_months,
    )

    total_months = total_months_for(period, period_freq)
    monthly_rate = monthly_rate_for(interest_rate, rate_freq)
    logger.debug("simulating %d months at monthly rate %.12f", total_months, monthly_rate)

    current_amount = float(initial_value)
    total_invested = float(initial_value)

    breakdown: List[MonthlyDataPoint] = [
        MonthlyDataPoint(
            month=0,
            totalInvested=initial_value,
            totalInterest=0,
            totalAmount=initial_value,
        )
    ]

    for month in range(1, total_months + 1):
        interest_earned = current_amount * monthly_rate
        current_amount += interest_earned + monthly_contribution
        total_invested += monthly_contribution

        if not (math.isfinite(current_amount) and math.isfinite(total_invested)):
            raise NumericOverflowError(month)

        breakdown.append(
            MonthlyDataPoint(
                month=month,
                totalInvested=round_cents(total_invested),
                totalInterest=round_cents(current_amount - total_invested),
                totalAmount=round_cents(current_amount),
            )
        )

    return SimulationResult(
        totalInvested=total_invested,
        totalInterest=current_amount - total_invested,
        finalAmount=current_amount,
        monthlyBreakdown=breakdown,
    )


def simulate(request: SimulationInput, max_months: Optional[int] = None) -> SimulationResult:
    """Run the simulation described by a validated request."""
    return calculate_compound_interest(
        initial_value=request.initialValue,
        monthly_contribution=request.monthlyContribution,
        interest_rate=request.interestRate,
        rate_frequency=request.rateFrequency,
        period=request.period,
        period_frequency=request.periodFrequency,
        max_months=max_months,
    )
