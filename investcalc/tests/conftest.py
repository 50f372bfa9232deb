from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from investcalc.app import create_app
from investcalc.models import CalculatorParams


@pytest.fixture()
def app(tmp_path):
    return create_app(
        {
            "TESTING": True,
            "PARAMS_DB_PATH": str(tmp_path / "params.db"),
        }
    )


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def default_plan() -> CalculatorParams:
    return CalculatorParams(
        initialCapital=10000,
        monthlyInput=500,
        annualReturn=7,
        targetCapital=100000,
    )
