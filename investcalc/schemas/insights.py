"""Response models for the summary and comparison features."""

from __future__ import annotations

from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel


class ScenarioComparison(BaseModel):
    baseTargetMonth: Optional[int] = None
    alternativeTargetMonth: Optional[int] = None
    alternativeCapitalAtTarget: Optional[float] = None
    monthsDifference: Optional[int] = None
    faster: Optional[bool] = None
    betterScenario: Optional[Literal["current", "alternative"]] = None
    improvementPct: Optional[float] = None


class InflationAdjustment(BaseModel):
    inflationRate: float
    years: float
    nominalValue: float
    realValue: float
    purchasingPowerLoss: float
    targetRealValue: float
    inflationMultiplier: float


class GoalProgress(BaseModel):
    currentCapital: float
    progressPct: float
    targetMonth: Optional[int] = None
    yearsToTarget: int = 0
    monthsRemainder: int = 0
    onTrack: bool = False


class TargetSummary(BaseModel):
    targetCapital: float
    targetMonth: int
    years: int
    months: int
    targetDate: date
    # "auto" when no time frame was pinned
    status: Literal["ahead", "on_schedule", "behind", "auto"]
    monthsAhead: int = 0
    monthsBehind: int = 0


class RiskFactors(BaseModel):
    isHighReturn: bool
    isShortTimeframe: bool
    isHighTarget: bool
    dependsHeavilyOnGains: bool


class RiskAssessment(BaseModel):
    riskScore: int
    riskLevel: Literal["Low", "Medium", "High", "Very High"]
    factors: RiskFactors
    recommendations: List[str]


class InsightsResponse(BaseModel):
    goalProgress: GoalProgress
    targetSummary: Optional[TargetSummary] = None
    risk: RiskAssessment
