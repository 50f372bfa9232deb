"""Pydantic schema for the health-check endpoint."""

from pydantic import BaseModel

from investcalc.config import MAX_MONTHS


class PingResponse(BaseModel):
    message: str = "pong"
    service: str = "investcalc"
    # longest run the engine will produce, for clients sizing tables
    maxMonths: int = MAX_MONTHS
