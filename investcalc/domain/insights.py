from __future__ import annotations

from typing import List, Optional

from investcalc.models import CalculatorParams
from investcalc.schemas.insights import (
    GoalProgress,
    RiskAssessment,
    RiskFactors,
    TargetSummary,
)
from investcalc.schemas.projection import ProjectionResult

HIGH_RETURN_PCT = 8
SHORT_TIMEFRAME_MONTHS = 60


def goal_progress(params: CalculatorParams, projection: ProjectionResult) -> GoalProgress:
    """Where the plan stands today and how long until the target."""
    if params.targetCapital:
        progress = min(params.initialCapital / params.targetCapital * 100, 100)
    else:
        progress = 0.0

    target_month = projection.targetMonth
    years, months = divmod(target_month, 12) if target_month else (0, 0)
    return GoalProgress(
        currentCapital=params.initialCapital,
        progressPct=progress,
        targetMonth=target_month,
        yearsToTarget=years,
        monthsRemainder=months,
        onTrack=target_month is not None,
    )


def target_summary(params: CalculatorParams, projection: ProjectionResult) -> Optional[TargetSummary]:
    """
    When the target is hit, and whether that beats a pinned time frame.

    Returns None when the run never reaches targetCapital. futureDate of
    the target row is the target date.
    """
    target_month = projection.targetMonth
    if target_month is None:
        return None

    years, months = divmod(target_month, 12)
    summary = TargetSummary(
        targetCapital=params.targetCapital,
        targetMonth=target_month,
        years=years,
        months=months,
        targetDate=projection.row_at(target_month).futureDate,
        status="auto",
    )

    time_frame = params.fixed_horizon
    if time_frame is None:
        return summary
    if target_month <= time_frame:
        summary.monthsAhead = time_frame - target_month
        summary.status = "ahead" if summary.monthsAhead > 0 else "on_schedule"
    else:
        summary.monthsBehind = target_month - time_frame
        summary.status = "behind"
    return summary


def assess_risk(params: CalculatorParams, projection: ProjectionResult) -> RiskAssessment:
    """Heuristic risk score (0-100) for how aggressive the plan is."""
    time_frame = params.targetTimeFrame or 0
    final = projection.final_row

    factors = RiskFactors(
        isHighReturn=params.annualReturn > HIGH_RETURN_PCT,
        isShortTimeframe=time_frame < SHORT_TIMEFRAME_MONTHS,
        isHighTarget=params.targetCapital > (params.initialCapital + params.monthlyInput * time_frame) * 2,
        dependsHeavilyOnGains=bool(final and final.capital and final.gains / final.capital > 0.5),
    )

    score = 0
    if factors.isHighReturn:
        score += 30
    if factors.isShortTimeframe:
        score += 25
    if factors.isHighTarget:
        score += 25
    if factors.dependsHeavilyOnGains:
        score += 20

    if score <= 25:
        level = "Low"
    elif score <= 50:
        level = "Medium"
    elif score <= 75:
        level = "High"
    else:
        level = "Very High"

    recommendations: List[str] = []
    if factors.isHighReturn:
        recommendations.append(
            f"Your expected {params.annualReturn:g}% return is optimistic. "
            "Consider more conservative estimates (5-7%)."
        )
    if factors.isShortTimeframe:
        recommendations.append(
            "Short timeframe increases risk. Consider extending your timeline for more stability."
        )
    if factors.isHighTarget:
        recommendations.append(
            "Your target is ambitious. Consider increasing monthly contributions or extending timeline."
        )
    if factors.dependsHeavilyOnGains:
        share = final.gains / final.capital * 100
        recommendations.append(
            f"{share:.0f}% of your target depends on investment gains. Consider increasing contributions."
        )
    if score <= 25:
        recommendations.append(
            "Your plan looks conservative and achievable. Great job on realistic expectations!"
        )

    return RiskAssessment(
        riskScore=score,
        riskLevel=level,
        factors=factors,
        recommendations=recommendations,
    )


__all__ = ["assess_risk", "goal_progress", "target_summary"]
