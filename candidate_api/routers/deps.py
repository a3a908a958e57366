"""Shared FastAPI dependencies for the route handlers."""

from __future__ import annotations

import json
from typing import Any

from fastapi import Request

from candidate_api.core.errors import ValidationError
from candidate_api.db.gateway import CandidateGateway

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


def get_gateway(request: Request) -> CandidateGateway:
    """Return the gateway built at startup and stored on ``app.state``."""
    return request.app.state.gateway


async def read_body(request: Request) -> dict[str, Any]:
    """Parse a JSON or url-encoded body into a plain dict.

    An empty body, or one with any other content type, parses as ``{}`` so
    the field validator reports what is missing.  A JSON body that is not an
    object is rejected with 400.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPE):
        form = await request.form()
        return {key: value for key, value in form.items()}
    if not content_type.startswith(JSON_CONTENT_TYPE):
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValidationError(["request body must be valid JSON"]) from exc
    if not isinstance(payload, dict):
        raise ValidationError(["request body must be a JSON object"])
    return payload
