"""Encode calculator inputs into a token that fits in a share link."""

from __future__ import annotations

import base64
import binascii
import json

from pydantic import ValidationError

from investcalc.config import DEFAULT_PARAMS
from investcalc.models import CalculatorParams


class ShareLinkError(ValueError):
    pass


def encode_params(params: CalculatorParams) -> str:
    raw = json.dumps(params.model_dump(), separators=(",", ":")).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii")


def decode_params(token: str) -> CalculatorParams:
    """Inverse of encode_params; missing fields fall back to the defaults."""
    try:
        padded = token + "=" * (-len(token) % 4)
        payload = json.loads(base64.urlsafe_b64decode(padded.encode("ascii")))
    except (binascii.Error, UnicodeError, ValueError) as exc:
        raise ShareLinkError(f"malformed share token: {exc}") from exc

    if not isinstance(payload, dict):
        raise ShareLinkError("share token does not hold calculator parameters")

    try:
        return CalculatorParams.model_validate({**DEFAULT_PARAMS, **payload})
    except ValidationError as exc:
        raise ShareLinkError(f"invalid shared parameters: {exc.error_count()} error(s)") from exc


def share_query(params: CalculatorParams) -> str:
    return f"data={encode_params(params)}"


__all__ = ["ShareLinkError", "decode_params", "encode_params", "share_query"]
