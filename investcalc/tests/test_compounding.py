from __future__ import annotations

from math import isclose

from investcalc.core.compounding import periodic_rate, simulate, step


def test_periodic_rate_is_annual_percent_over_twelve():
    assert isclose(periodic_rate(12), 0.01)
    assert periodic_rate(0) == 0.0


def test_contribution_is_added_before_return():
    # 100 + 10 = 110, then 10% -> 121 (return-first would give 120)
    assert isclose(step(100.0, 10.0, 0.1), 121.0)
    assert isclose(simulate(100.0, 10.0, 0.1, 2), (121.0 + 10.0) * 1.1)


def test_zero_periods_returns_start_capital():
    assert simulate(2500.0, 100.0, 0.05, 0) == 2500.0


def test_negative_periods_are_treated_as_zero():
    assert simulate(2500.0, 100.0, 0.05, -3) == 2500.0


def test_zero_rate_accumulates_contributions_only():
    assert isclose(simulate(1000.0, 250.0, 0.0, 12), 4000.0)


def test_simulate_is_non_decreasing_in_rate_over_bracket():
    """The bisection relies on this for the inputs the projection produces."""
    rates = [-0.1 + i * 0.01 for i in range(61)]
    for start, contribution, periods in [(10000.0, 500.0, 120), (0.0, 100.0, 24), (5000.0, 0.0, 600)]:
        values = [simulate(start, contribution, rate, periods) for rate in rates]
        assert all(a <= b for a, b in zip(values, values[1:]))
