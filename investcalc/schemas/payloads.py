"""Request bodies accepted by the HTTP API."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from investcalc.config import DEFAULT_INFLATION_RATE
from investcalc.models import CalculatorParams


class ProjectionRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    params: CalculatorParams
    reference: Optional[date] = Field(
        default=None,
        description="Month the projection starts from; defaults to today.",
    )


class InflationRequest(ProjectionRequest):
    inflationRate: float = Field(DEFAULT_INFLATION_RATE, gt=-100, allow_inf_nan=False)


class CompareRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base: CalculatorParams
    alternative: Optional[CalculatorParams] = None


class ShareDecodeRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    token: str = Field(..., min_length=1)
