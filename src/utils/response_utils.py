# Copyright 2025 Loopper-AI
# Response utilities for API Gateway WebSocket routes

from __future__ import annotations

import json
from typing import Any

BAD_GATEWAY_BODY = json.dumps({"message": "Bad Gateway: Backend Unreachable"}, separators=(",", ":"))


def create_response(status_code: int, body: str | None = None) -> dict[str, Any]:
    """
    Create an API Gateway WebSocket route response.

    Args:
        status_code: HTTP status code
        body: Raw response body; omitted from the response when None

    Returns:
        Route response dictionary
    """
    response: dict[str, Any] = {"statusCode": status_code}
    if body is not None:
        response["body"] = body
    return response


def bad_gateway_response() -> dict[str, Any]:
    """Fixed 502 returned whenever the backend could not be reached."""
    return create_response(502, BAD_GATEWAY_BODY)
