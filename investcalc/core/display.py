"""How a row's required monthly return is presented to users."""

from __future__ import annotations

from investcalc.schemas.projection import ProjectionRow, RequiredReturnDisplay

IMPOSSIBLE_ANNUAL_PCT = 300
HIGH_ANNUAL_PCT = 20
ELEVATED_ANNUAL_PCT = 10


def annualize(monthly_rate: float) -> float:
    """Compound a monthly rate over twelve months, as a percentage."""
    return ((1 + monthly_rate) ** 12 - 1) * 100


def required_return_display(row: ProjectionRow, target_reached: bool) -> RequiredReturnDisplay:
    if row.remainingMonths <= 0 or target_reached:
        if target_reached:
            return RequiredReturnDisplay(text="Target reached!", tier="reached")
        return RequiredReturnDisplay(text="-", tier="none")

    annual_pct = annualize(row.requiredMonthlyReturn)
    if annual_pct > IMPOSSIBLE_ANNUAL_PCT:
        return RequiredReturnDisplay(text="Impossible", tier="impossible")
    if annual_pct < 0:
        return RequiredReturnDisplay(text="No return needed", tier="no_return_needed")

    if annual_pct > HIGH_ANNUAL_PCT:
        tier = "high"
    elif annual_pct > ELEVATED_ANNUAL_PCT:
        tier = "elevated"
    else:
        tier = "normal"
    return RequiredReturnDisplay(text=f"{row.requiredMonthlyReturn * 100:.3f}%", tier=tier)


def display_for(row: ProjectionRow, target_capital: float) -> RequiredReturnDisplay:
    return required_return_display(row, row.capital >= target_capital)


__all__ = ["annualize", "display_for", "required_return_display"]
