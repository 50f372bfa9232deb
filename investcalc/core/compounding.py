"""Monthly compounding with a fixed contribution."""

from __future__ import annotations


def periodic_rate(annual_return: float) -> float:
    """Convert an annual percentage (7 == 7%/year) into a monthly rate."""
    return annual_return / 100 / 12


def step(capital: float, contribution: float, rate: float) -> float:
    # contribution lands first, then the month's return applies to it
    return (capital + contribution) * (1 + rate)


def simulate(start_capital: float, contribution: float, rate: float, periods: int) -> float:
    """Balance after `periods` months; non-positive periods return start_capital."""
    amount = start_capital
    for _ in range(max(periods, 0)):
        amount = step(amount, contribution, rate)
    return amount


__all__ = ["periodic_rate", "simulate", "step"]
