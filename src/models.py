# Copyright 2025 Loopper-AI
# Data models for the WebSocket shims

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

EMPTY_BODY = "{}"


@dataclass
class ForwardRequest:
    """One inbound WebSocket event, reduced to what the backend needs."""

    connection_id: str
    token: str = ""
    body: str = EMPTY_BODY

    @classmethod
    def from_connect_event(cls, event: dict[str, Any]) -> ForwardRequest:
        """$connect event: connection id plus optional ?token= query parameter."""
        params = event.get("queryStringParameters") or {}
        return cls(
            connection_id=event["requestContext"]["connectionId"],
            token=params.get("token") or "",
        )

    @classmethod
    def from_message_event(cls, event: dict[str, Any]) -> ForwardRequest:
        """Message event: connection id plus raw frame body."""
        body = event.get("body")
        return cls(
            connection_id=event["requestContext"]["connectionId"],
            body=body if isinstance(body, str) and body else EMPTY_BODY,
        )

    def headers(self, with_authorization: bool = False) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "X-Connection-Id": self.connection_id,
        }
        if with_authorization:
            # Header is always sent on connect; empty when no token was supplied
            headers["Authorization"] = f"Bearer {self.token}" if self.token else ""
        return headers


@dataclass
class ForwardResult:
    """Result of POSTing to the backend.

    success=True means the backend answered, whatever the status code.
    success=False means the call never completed (Backend Unreachable).
    """

    success: bool
    status_code: int | None = None
    response_body: str = ""
    error: str | None = None
