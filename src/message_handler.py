# Copyright 2025 Loopper-AI
# Lambda handler: WebSocket message → POST frame body to backend
#
# Only the backend's status code is relayed; its body is discarded.

from __future__ import annotations

import logging
from typing import Any

from .clients import HttpClient
from .config import Config
from .models import ForwardRequest
from .utils import bad_gateway_response, create_response

logger = logging.getLogger()


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """WebSocket message → POST to backend, relay status code."""
    config = Config.from_environment()
    logger.setLevel(getattr(logging, config.log_level, logging.INFO))

    request = ForwardRequest.from_message_event(event)
    request_id = getattr(context, "aws_request_id", "") if context else ""
    logger.info("message started request_id=%s connection_id=%s", request_id, request.connection_id)

    is_valid, err = config.validate()
    if not is_valid:
        logger.warning("Configuration error: %s", err)

    result = HttpClient(timeout=config.request_timeout).post(
        config.backend_url,
        request.headers(),
        request.body.encode("utf-8"),
    )

    if not result.success:
        logger.error("Message shim error: backend unreachable connection_id=%s error=%s", request.connection_id, result.error)
        return bad_gateway_response()

    logger.info("Forwarded message: status=%s connection_id=%s", result.status_code, request.connection_id)
    return create_response(result.status_code)
