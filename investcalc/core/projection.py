from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from investcalc.config import MAX_MONTHS
from investcalc.core.compounding import periodic_rate
from investcalc.core.horizon import estimate_horizon
from investcalc.core.required_rate import required_rate
from investcalc.models import CalculatorParams
from investcalc.schemas.projection import ProjectionResult, ProjectionRow

logger = logging.getLogger(__name__)


def add_months(reference: date, months: int) -> date:
    """First day of the calendar month `months` after reference's month."""
    years, month_index = divmod(reference.month - 1 + months, 12)
    return date(reference.year + years, month_index + 1, 1)


def resolve_horizon(params: CalculatorParams) -> Optional[int]:
    """Pinned targetTimeFrame when positive, otherwise the estimated horizon."""
    return params.fixed_horizon or estimate_horizon(params)


def project(params: CalculatorParams, reference: Optional[date] = None) -> ProjectionResult:
    """
    Month-by-month projection of params.

    Order of operations (per month):
      1) Add monthlyInput to the running capital.
      2) Apply the month's return on that amount.
      3) Record the row, including the rate still required to hit
         targetCapital by the horizon from this row's capital.

    The run lasts for the horizon when there is one, else MAX_MONTHS.
    targetMonth is the first month with capital >= targetCapital and is
    never moved by later rows.
    """
    reference = reference or date.today()
    horizon = resolve_horizon(params)
    has_horizon = horizon is not None and horizon > 0
    max_months = horizon if has_horizon else MAX_MONTHS

    rate = periodic_rate(params.annualReturn)
    capital = float(params.initialCapital)
    target_month: Optional[int] = None

    rows: List[ProjectionRow] = []
    for month in range(1, max_months + 1):
        before_return = capital + params.monthlyInput
        monthly_return = before_return * rate
        capital = before_return + monthly_return

        if target_month is None and capital >= params.targetCapital:
            target_month = month

        remaining = horizon - month if has_horizon else 0
        required = (
            required_rate(capital, params.monthlyInput, params.targetCapital, remaining)
            if remaining > 0
            else 0.0
        )

        contributions = params.initialCapital + params.monthlyInput * month
        rows.append(
            ProjectionRow(
                month=month,
                futureDate=add_months(reference, month),
                capital=capital,
                totalContributions=contributions,
                monthlyReturn=monthly_return,
                gains=capital - contributions,
                requiredMonthlyReturn=required,
                remainingMonths=remaining,
            )
        )

        if target_month is not None and has_horizon and month >= horizon:
            break

    logger.debug(
        "projected %d rows (horizon=%s, target month=%s)", len(rows), horizon, target_month
    )
    return ProjectionResult(rows=rows, targetMonth=target_month, effectiveHorizon=horizon)


__all__ = ["add_months", "project", "resolve_horizon"]
