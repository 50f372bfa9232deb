"""
Post-processing over independent projection runs.

Neither feature changes the engine: comparison runs it twice, inflation
adjustment rescales the final row of a finished run.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from investcalc.config import DEFAULT_INFLATION_RATE, DEFAULT_SCENARIO_RETURN_BUMP
from investcalc.core.projection import project
from investcalc.models import CalculatorParams
from investcalc.schemas.insights import InflationAdjustment, ScenarioComparison
from investcalc.schemas.projection import ProjectionResult


def default_alternative(base: CalculatorParams) -> CalculatorParams:
    """The base plan with a slightly more optimistic annual return."""
    return base.model_copy(update={"annualReturn": base.annualReturn + DEFAULT_SCENARIO_RETURN_BUMP})


def compare_scenarios(
    base: CalculatorParams,
    alternative: Optional[CalculatorParams] = None,
    reference: Optional[date] = None,
) -> ScenarioComparison:
    alternative = alternative or default_alternative(base)
    base_run = project(base, reference)
    alt_run = project(alternative, reference)

    comparison = ScenarioComparison(
        baseTargetMonth=base_run.targetMonth,
        alternativeTargetMonth=alt_run.targetMonth,
    )
    if alt_run.targetMonth is not None:
        comparison.alternativeCapitalAtTarget = alt_run.row_at(alt_run.targetMonth).capital

    # the difference is only meaningful when both plans get there
    if base_run.targetMonth is not None and alt_run.targetMonth is not None:
        diff = abs(base_run.targetMonth - alt_run.targetMonth)
        faster = alt_run.targetMonth < base_run.targetMonth
        comparison.monthsDifference = diff
        comparison.faster = faster
        comparison.betterScenario = "alternative" if faster else "current"
        comparison.improvementPct = diff / base_run.targetMonth * 100

    return comparison


def adjust_for_inflation(
    projection: ProjectionResult,
    target_capital: float,
    inflation_rate: float = DEFAULT_INFLATION_RATE,
) -> Optional[InflationAdjustment]:
    """Express the final projected capital in today's money; inflation_rate is a percentage."""
    final = projection.final_row
    if final is None:
        return None

    years = final.month / 12
    multiplier = (1 + inflation_rate / 100) ** years
    real_value = final.capital / multiplier
    return InflationAdjustment(
        inflationRate=inflation_rate,
        years=years,
        nominalValue=final.capital,
        realValue=real_value,
        purchasingPowerLoss=final.capital - real_value,
        targetRealValue=target_capital / multiplier,
        inflationMultiplier=multiplier,
    )


__all__ = ["adjust_for_inflation", "compare_scenarios", "default_alternative"]
