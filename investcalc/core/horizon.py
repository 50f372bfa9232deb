"""Estimate how many months a plan needs to reach its target."""

from __future__ import annotations

import logging
from typing import Optional

from investcalc.config import MAX_MONTHS
from investcalc.core.compounding import periodic_rate, step
from investcalc.models import CalculatorParams

logger = logging.getLogger(__name__)


def estimate_horizon(params: CalculatorParams) -> Optional[int]:
    """
    Months until capital first meets targetCapital, or None.

    A zero initialCapital, targetCapital or annualReturn is treated the same
    as a missing value and yields None without simulating. None is also
    returned when the target is not met within MAX_MONTHS.
    """
    if not params.initialCapital or not params.targetCapital or not params.annualReturn:
        return None

    rate = periodic_rate(params.annualReturn)
    capital = params.initialCapital
    month = 0
    while month < MAX_MONTHS and capital < params.targetCapital:
        month += 1
        capital = step(capital, params.monthlyInput, rate)

    if capital >= params.targetCapital:
        return month

    logger.debug("target %.2f unreachable within %d months", params.targetCapital, MAX_MONTHS)
    return None


__all__ = ["estimate_horizon"]
