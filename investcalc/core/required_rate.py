"""Solve for the monthly rate that reaches a target within a fixed number of months."""

from __future__ import annotations

from investcalc.core.compounding import simulate
from investcalc.core.root_finder import bisect


def required_rate(
    current_capital: float,
    contribution: float,
    target_capital: float,
    remaining_periods: int,
) -> float:
    """
    Monthly rate needed to grow current_capital into target_capital.

    Returns 0 when there is no time left or the target is already met. The
    result is not checked for plausibility; it can be negative or far above
    anything achievable.
    """
    if remaining_periods <= 0:
        return 0.0
    if current_capital >= target_capital:
        return 0.0

    return bisect(
        lambda rate: simulate(current_capital, contribution, rate, remaining_periods),
        target_capital,
    )


__all__ = ["required_rate"]
