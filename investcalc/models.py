from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from investcalc.config import DEFAULT_PARAMS, MAX_MONTHS


class CalculatorParams(BaseModel):
    """Inputs for one projection run; annualReturn is a percentage (7 means 7%/year)."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    initialCapital: float
    monthlyInput: float
    # -100%..1000%/yr keeps a full 600-month run finite
    annualReturn: float = Field(ge=-100, le=1000)
    targetCapital: float
    targetTimeFrame: Optional[int] = Field(default=None, le=MAX_MONTHS)

    @property
    def fixed_horizon(self) -> Optional[int]:
        # zero or negative time frames count as "not pinned"
        if self.targetTimeFrame and self.targetTimeFrame > 0:
            return self.targetTimeFrame
        return None


def default_params() -> CalculatorParams:
    return CalculatorParams.model_validate(DEFAULT_PARAMS)
