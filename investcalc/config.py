"""Engine constants, default inputs and Flask configuration."""

from __future__ import annotations

import os

# Hard cap on any run: 50 years of monthly periods.
MAX_MONTHS = 600

# Bisection controls for the required-rate search.
MAX_ITERATIONS = 100
TOLERANCE = 0.000001
RATE_LOW = -0.1
RATE_HIGH = 0.5

STORAGE_KEY = "investmentCalculatorParams"

DEFAULT_PARAMS = {
    "initialCapital": 10000,
    "monthlyInput": 500,
    "annualReturn": 7,
    "targetCapital": 100000,
    "targetTimeFrame": None,
}

DEFAULT_INFLATION_RATE = 3.0
DEFAULT_SCENARIO_RETURN_BUMP = 2.0


class Config:
    """Default settings for create_app(); every value can be overridden from the environment."""

    CORS_ORIGINS = os.getenv(
        "CORS_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173",
    )
    PARAMS_DB_PATH = os.getenv(
        "PARAMS_DB_PATH",
        os.path.join(os.path.dirname(__file__), "app.db"),
    )
    STORAGE_KEY = os.getenv("STORAGE_KEY", STORAGE_KEY)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
