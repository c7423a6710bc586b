"""Scenario the simulator starts from (and resets to)."""

from simulator.schemas.simulation import PeriodFrequency, RateFrequency, SimulationInput


def get_default_input() -> SimulationInput:
    """Return R$ 1.000 initial, R$ 500 a month at 10% a year for 10 years."""
    return SimulationInput(
        initialValue=1000.0,
        monthlyContribution=500.0,
        interestRate=10.0,
        rateFrequency=RateFrequency.YEARLY,
        period=10,
        periodFrequency=PeriodFrequency.YEARS,
    )
