"""Display helpers for simulation results (pt-BR currency, chart labels)."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional, Union

from simulator.schemas.simulation import PeriodFrequency, SimulationResult, SimulationSummary

CURRENCY_SYMBOL = "R$"
_NBSP = "\u00a0"
_PT_BR_SEPARATORS = str.maketrans({",": ".", ".": ","})
_CENT = Decimal("0.01")
_DISPLAY_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)
# longer breakdowns only label whole years
_DENSE_CHART_POINTS = 60


def format_currency(value: float) -> str:
    """
    Format as Brazilian reais, e.g. ``R$ 1.234,56`` (non-breaking space after the symbol).

    Cents are rounded half up from the shortest decimal form of the number
    (``1.005`` shows as ``R$ 1,01``), not from its exact binary value.
    """
    cents = Decimal(repr(abs(value))).quantize(_CENT, context=_DISPLAY_CONTEXT)
    digits = f"{cents:,.2f}".translate(_PT_BR_SEPARATORS)
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{_NBSP}{digits}"


def format_month_label(
    month: int,
    period_frequency: Union[PeriodFrequency, str],
    total_points: Optional[int] = None,
) -> str:
    """
    Axis label for a breakdown month: ``Início``, ``2a`` (years) or ``7m`` (months).

    When ``total_points`` is given and the breakdown has more than 60 points,
    months that are not a whole year get an empty label.
    """
    if total_points is not None and total_points > _DENSE_CHART_POINTS and month % 12 != 0:
        return ""
    if month == 0:
        return "Início"
    if PeriodFrequency(period_frequency) == PeriodFrequency.YEARS:
        years = month / 12
        return f"{int(years) if years.is_integer() else years}a"
    return f"{month}m"


def format_tooltip_label(month: int) -> str:
    return f"Mês {month}"


def summarize(result: SimulationResult) -> SimulationSummary:
    return SimulationSummary(
        totalMonths=len(result.monthlyBreakdown) - 1,
        totalInvested=result.totalInvested,
        totalInterest=result.totalInterest,
        finalAmount=result.finalAmount,
        formattedTotalInvested=format_currency(result.totalInvested),
        formattedTotalInterest=format_currency(result.totalInterest),
        formattedFinalAmount=format_currency(result.finalAmount),
    )
