from __future__ import annotations

from datetime import date

import pytest

from investcalc.core.projection import project
from investcalc.domain.insights import assess_risk, goal_progress, target_summary
from investcalc.models import CalculatorParams

REFERENCE = date(2025, 1, 15)


def test_goal_progress_splits_months_into_years(default_plan):
    result = project(default_plan, REFERENCE)
    progress = goal_progress(default_plan, result)

    assert progress.progressPct == pytest.approx(10.0)
    assert progress.onTrack is True
    assert progress.yearsToTarget * 12 + progress.monthsRemainder == result.targetMonth


def test_goal_progress_is_capped_at_hundred_percent():
    params = CalculatorParams(initialCapital=300, monthlyInput=0, annualReturn=0, targetCapital=100)
    progress = goal_progress(params, project(params, REFERENCE))
    assert progress.progressPct == 100


def test_goal_progress_without_target_month():
    params = CalculatorParams(initialCapital=100, monthlyInput=0, annualReturn=0, targetCapital=1000)
    progress = goal_progress(params, project(params, REFERENCE))

    assert progress.onTrack is False
    assert (progress.yearsToTarget, progress.monthsRemainder) == (0, 0)


def test_target_summary_none_when_never_reached():
    params = CalculatorParams(initialCapital=100, monthlyInput=0, annualReturn=0, targetCapital=1000)
    assert target_summary(params, project(params, REFERENCE)) is None


def test_target_summary_auto_time_frame(default_plan):
    result = project(default_plan, REFERENCE)
    summary = target_summary(default_plan, result)

    assert summary.status == "auto"
    assert summary.targetDate == result.row_at(result.targetMonth).futureDate


def test_target_summary_ahead_of_schedule():
    params = CalculatorParams(
        initialCapital=19000,
        monthlyInput=500,
        annualReturn=6,
        targetCapital=20000,
        targetTimeFrame=12,
    )
    summary = target_summary(params, project(params, REFERENCE))

    assert summary.targetMonth == 2
    assert summary.status == "ahead"
    assert summary.monthsAhead == 10


def test_low_risk_plan_gets_positive_note():
    params = CalculatorParams(
        initialCapital=50000,
        monthlyInput=1000,
        annualReturn=5,
        targetCapital=100000,
        targetTimeFrame=120,
    )
    risk = assess_risk(params, project(params, REFERENCE))

    assert risk.riskScore == 0
    assert risk.riskLevel == "Low"
    assert risk.recommendations[-1].startswith("Your plan looks conservative")


def test_aggressive_plan_scores_very_high():
    params = CalculatorParams(
        initialCapital=1000,
        monthlyInput=100,
        annualReturn=60,
        targetCapital=1000000,
        targetTimeFrame=36,
    )
    risk = assess_risk(params, project(params, REFERENCE))

    assert risk.factors.isHighReturn
    assert risk.factors.isShortTimeframe
    assert risk.factors.isHighTarget
    assert risk.factors.dependsHeavilyOnGains
    assert risk.riskScore == 100
    assert risk.riskLevel == "Very High"
    assert len(risk.recommendations) == 4
