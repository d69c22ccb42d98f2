# Copyright 2025 Loopper-AI
# Lambda handler: WebSocket $connect → POST to backend
#
# API Gateway invokes with requestContext.connectionId and an optional
# ?token= query parameter. The backend registers the connection and its
# status/body are relayed to API Gateway unchanged:
#   2xx  → connection accepted
#   else → connection rejected with the backend's status
#   fail → 502 Bad Gateway

from __future__ import annotations

import logging
from typing import Any

from .clients import HttpClient
from .config import Config
from .models import ForwardRequest
from .utils import bad_gateway_response, create_response

logger = logging.getLogger()


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """WebSocket $connect → POST to backend, relay status and body."""
    config = Config.from_environment()
    logger.setLevel(getattr(logging, config.log_level, logging.INFO))

    request = ForwardRequest.from_connect_event(event)
    request_id = getattr(context, "aws_request_id", "") if context else ""
    logger.info(
        "connect started request_id=%s connection_id=%s has_token=%s",
        request_id,
        request.connection_id,
        bool(request.token),
    )

    is_valid, err = config.validate()
    if not is_valid:
        logger.warning("Configuration error: %s", err)

    result = HttpClient(timeout=config.request_timeout).post(
        config.backend_url,
        request.headers(with_authorization=True),
    )

    if not result.success:
        logger.error("Shim error: backend unreachable connection_id=%s error=%s", request.connection_id, result.error)
        return bad_gateway_response()

    logger.info("Forwarded connect: status=%s connection_id=%s", result.status_code, request.connection_id)
    return create_response(result.status_code, result.response_body)
