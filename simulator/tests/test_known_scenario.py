from __future__ import annotations

import pytest

from simulator.core.compounding import calculate_compound_interest

# (month, totalInvested, totalInterest, totalAmount) for R$ 1.000 + R$ 500/month at 10% a year
GOLDEN_BREAKDOWN = [
    (0, 1000.00, 0.00, 1000.00),
    (1, 1500.00, 7.97, 1507.97),
    (2, 2000.00, 20.00, 2020.00),
    (3, 2500.00, 36.11, 2536.11),
    (4, 3000.00, 56.33, 3056.33),
    (5, 3500.00, 80.70, 3580.70),
    (6, 4000.00, 109.25, 4109.25),
    (7, 4500.00, 142.02, 4642.02),
    (8, 5000.00, 179.04, 5179.04),
    (9, 5500.00, 220.34, 5720.34),
    (10, 6000.00, 265.95, 6265.95),
    (11, 6500.00, 315.92, 6815.92),
    (12, 7000.00, 370.27, 7370.27),
]


def test_one_year_breakdown_matches_pinned_values():
    result = calculate_compound_interest(1000, 500, 10, "yearly", 1, "years")

    rows = [
        (point.month, point.totalInvested, point.totalInterest, point.totalAmount)
        for point in result.monthlyBreakdown
    ]
    assert rows == GOLDEN_BREAKDOWN


def test_one_year_summary_is_unrounded():
    result = calculate_compound_interest(1000, 500, 10, "yearly", 1, "years")

    assert result.totalInvested == 7000
    assert result.finalAmount == pytest.approx(7370.26830613188, abs=1e-9)
    assert result.totalInterest == pytest.approx(370.26830613188, abs=1e-9)
    assert result.finalAmount != result.monthlyBreakdown[-1].totalAmount
    assert result.totalInterest == result.finalAmount - result.totalInvested


def test_twelve_months_equals_one_year():
    in_years = calculate_compound_interest(1000, 500, 10, "yearly", 1, "years")
    in_months = calculate_compound_interest(1000, 500, 10, "yearly", 12, "months")

    assert in_years == in_months
