from __future__ import annotations

from flask.testing import FlaskClient


def projection_payload() -> dict:
    return {
        "params": {
            "initialCapital": 10000,
            "monthlyInput": 500,
            "annualReturn": 7,
            "targetCapital": 100000,
            "targetTimeFrame": 24,
        },
        "reference": "2025-01-15",
    }


def test_projection_endpoint_returns_rows_with_display(client: FlaskClient):
    resp = client.post("/api/projection", json=projection_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["effectiveHorizon"] == 24
    assert body["targetMonth"] is None
    assert len(body["rows"]) == 24

    first = body["rows"][0]
    assert first["month"] == 1
    assert first["futureDate"] == "2025-02-01"
    assert first["display"]["tier"] in {"high", "impossible"}
    assert body["rows"][-1]["display"] == {"text": "-", "tier": "none"}


def test_invalid_payload_returns_400(client: FlaskClient):
    resp = client.post("/api/projection", json={"params": {"initialCapital": 10}})

    assert resp.status_code == 400
    body = resp.get_json()
    assert "detail" in body


def test_unknown_fields_are_rejected(client: FlaskClient):
    payload = projection_payload()
    payload["params"]["inflation"] = 3
    resp = client.post("/api/projection", json=payload)
    assert resp.status_code == 400


def test_horizon_endpoint(client: FlaskClient):
    params = projection_payload()["params"]
    params["targetTimeFrame"] = None

    resp = client.post("/api/horizon", json=params)
    assert resp.status_code == 200
    assert 100 <= resp.get_json()["horizon"] <= 130

    params["initialCapital"] = 0
    resp = client.post("/api/horizon", json=params)
    assert resp.get_json() == {"horizon": None}


def test_compare_endpoint_defaults_alternative(client: FlaskClient):
    base = dict(projection_payload()["params"], targetTimeFrame=None)
    resp = client.post("/api/compare", json={"base": base})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["betterScenario"] == "alternative"
    assert body["alternativeTargetMonth"] < body["baseTargetMonth"]


def test_inflation_endpoint(client: FlaskClient):
    payload = projection_payload()
    payload["inflationRate"] = 2.5
    resp = client.post("/api/inflation", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["years"] == 2
    assert body["realValue"] < body["nominalValue"]


def test_insights_endpoint(client: FlaskClient):
    resp = client.post("/api/insights", json=projection_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["targetSummary"] is None
    assert body["goalProgress"]["onTrack"] is False
    assert body["risk"]["factors"]["isShortTimeframe"] is True


def test_export_endpoint_returns_csv_attachment(client: FlaskClient):
    resp = client.post("/api/export", json=projection_payload())

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "investment-projection-2025-01-15.csv" in resp.headers["Content-Disposition"]
    lines = resp.get_data(as_text=True).splitlines()
    assert lines[0] == "Investment Calculator Export - 2025-01-15"
    assert len(lines) == 8 + 24


def test_time_frame_beyond_run_cap_returns_400(client: FlaskClient):
    payload = projection_payload()
    payload["params"]["targetTimeFrame"] = 601

    for path in ("/api/projection", "/api/export", "/api/insights", "/api/inflation"):
        resp = client.post(path, json=payload)
        assert resp.status_code == 400, path


def test_total_inflation_returns_400(client: FlaskClient):
    payload = projection_payload()
    payload["inflationRate"] = -100

    resp = client.post("/api/inflation", json=payload)
    assert resp.status_code == 400
    assert "detail" in resp.get_json()


def test_overflowing_return_returns_400(client: FlaskClient):
    payload = projection_payload()
    payload["params"].update(annualReturn=100000, targetTimeFrame=600)

    resp = client.post("/api/projection", json=payload)
    assert resp.status_code == 400
    assert b"Infinity" not in resp.data
