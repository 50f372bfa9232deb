"""Bisection over a fixed periodic-rate bracket."""

from __future__ import annotations

from typing import Callable

from investcalc.config import MAX_ITERATIONS, RATE_HIGH, RATE_LOW, TOLERANCE


def bisect(
    func: Callable[[float], float],
    target: float,
    low: float = RATE_LOW,
    high: float = RATE_HIGH,
    tolerance: float = TOLERANCE,
    max_iterations: int = MAX_ITERATIONS,
) -> float:
    """
    Return the rate in [low, high] where func(rate) meets target.

    func must be non-decreasing over the bracket; otherwise the answer is
    some crossing inside the bracket. A target outside [func(low), func(high)]
    is not rejected, the search just converges towards the nearest edge.
    """
    iterations = 0
    while high - low > tolerance and iterations < max_iterations:
        iterations += 1
        mid = (low + high) / 2
        if func(mid) < target:
            low = mid
        else:
            high = mid
    return (low + high) / 2


__all__ = ["bisect"]
