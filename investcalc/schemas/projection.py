"""Data contracts for projection results."""

from __future__ import annotations

from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

DisplayTier = Literal[
    "reached",
    "none",
    "impossible",
    "no_return_needed",
    "high",
    "elevated",
    "normal",
]


class ProjectionRow(BaseModel):
    """One simulated month."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    month: int = Field(..., ge=1)
    futureDate: date
    capital: float
    totalContributions: float
    monthlyReturn: float
    gains: float
    requiredMonthlyReturn: float
    remainingMonths: int


class ProjectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    rows: List[ProjectionRow]
    targetMonth: Optional[int] = None
    effectiveHorizon: Optional[int] = None

    @property
    def final_row(self) -> Optional[ProjectionRow]:
        return self.rows[-1] if self.rows else None

    def row_at(self, month: int) -> Optional[ProjectionRow]:
        # rows are gapless and 1-indexed
        if 1 <= month <= len(self.rows):
            return self.rows[month - 1]
        return None


class RequiredReturnDisplay(BaseModel):
    text: str
    tier: DisplayTier


class DisplayedRow(ProjectionRow):
    # row plus how its required return should be rendered
    display: RequiredReturnDisplay


class ProjectionResponse(BaseModel):
    rows: List[DisplayedRow]
    targetMonth: Optional[int] = None
    effectiveHorizon: Optional[int] = None


class HorizonResponse(BaseModel):
    horizon: Optional[int] = None
