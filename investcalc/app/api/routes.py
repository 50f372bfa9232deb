"""HTTP routes for the Flask API."""

from __future__ import annotations

from datetime import date
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import ValidationError

from investcalc.core.display import display_for
from investcalc.core.horizon import estimate_horizon
from investcalc.core.projection import project
from investcalc.database import ParamsStore
from investcalc.domain.insights import assess_risk, goal_progress, target_summary
from investcalc.domain.scenarios import adjust_for_inflation, compare_scenarios
from investcalc.export import export_filename, render_csv
from investcalc.models import CalculatorParams
from investcalc.schemas.insights import InsightsResponse
from investcalc.schemas.payloads import (
    CompareRequest,
    InflationRequest,
    ProjectionRequest,
    ShareDecodeRequest,
)
from investcalc.schemas.ping import PingResponse
from investcalc.schemas.projection import (
    DisplayedRow,
    HorizonResponse,
    ProjectionResponse,
)
from investcalc.share import ShareLinkError, decode_params, encode_params, share_query

api_bp = Blueprint("api", __name__)


def _json_body() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


def _params_store() -> ParamsStore:
    return current_app.extensions["params_store"]


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(ShareLinkError)
def _handle_share_error(exc: ShareLinkError):
    return jsonify({"detail": str(exc)}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(PingResponse().model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Month-by-month rows with the required-return display for each."""
    payload = ProjectionRequest.model_validate(_json_body())
    result = project(payload.params, payload.reference)
    current_app.logger.info(
        "projection: %d rows, target month %s", len(result.rows), result.targetMonth
    )

    response = ProjectionResponse(
        rows=[
            DisplayedRow(
                **row.model_dump(),
                display=display_for(row, payload.params.targetCapital),
            )
            for row in result.rows
        ],
        targetMonth=result.targetMonth,
        effectiveHorizon=result.effectiveHorizon,
    )
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/horizon")
def horizon() -> Any:
    """Auto-calculated time frame, without running a projection."""
    params = CalculatorParams.model_validate(_json_body())
    return jsonify(HorizonResponse(horizon=estimate_horizon(params)).model_dump())


@api_bp.post("/compare")
def compare() -> Any:
    payload = CompareRequest.model_validate(_json_body())
    comparison = compare_scenarios(payload.base, payload.alternative)
    return jsonify(comparison.model_dump())


@api_bp.post("/inflation")
def inflation() -> Any:
    payload = InflationRequest.model_validate(_json_body())
    result = project(payload.params, payload.reference)
    adjusted = adjust_for_inflation(result, payload.params.targetCapital, payload.inflationRate)
    return jsonify(adjusted.model_dump() if adjusted else None)


@api_bp.post("/insights")
def insights() -> Any:
    payload = ProjectionRequest.model_validate(_json_body())
    result = project(payload.params, payload.reference)
    response = InsightsResponse(
        goalProgress=goal_progress(payload.params, result),
        targetSummary=target_summary(payload.params, result),
        risk=assess_risk(payload.params, result),
    )
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/export")
def export() -> Any:
    """Projection as a downloadable CSV file."""
    payload = ProjectionRequest.model_validate(_json_body())
    reference = payload.reference or date.today()
    result = project(payload.params, reference)
    body = render_csv(result, payload.params, reference)
    return Response(
        body,
        mimetype="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{export_filename(reference)}"',
        },
    )


@api_bp.post("/share")
def share() -> Any:
    params = CalculatorParams.model_validate(_json_body())
    return jsonify({"token": encode_params(params), "query": share_query(params)})


@api_bp.post("/share/decode")
def share_decode() -> Any:
    payload = ShareDecodeRequest.model_validate(_json_body())
    return jsonify(decode_params(payload.token).model_dump())


@api_bp.get("/params")
def get_params() -> Any:
    """Last saved inputs, or the defaults."""
    return jsonify(_params_store().load().model_dump())


@api_bp.put("/params")
def put_params() -> Any:
    params = CalculatorParams.model_validate(_json_body())
    return jsonify(_params_store().save(params).model_dump())


@api_bp.delete("/params")
def delete_params() -> Any:
    return jsonify(_params_store().reset().model_dump())
