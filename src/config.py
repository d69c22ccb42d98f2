# Copyright 2025 Loopper-AI
# Configuration management for the WebSocket shims

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Immutable configuration from environment variables."""

    backend_url: str
    request_timeout: float | None = None
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> Config:
        """Load config. REQUEST_TIMEOUT is optional; unset means no client-side timeout."""
        return cls(
            backend_url=(os.environ.get("BACKEND_URL") or "").strip(),
            request_timeout=_parse_timeout(os.environ.get("REQUEST_TIMEOUT")),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> tuple[bool, str | None]:
        if not self.backend_url:
            return False, "BACKEND_URL not configured"
        return True, None


def _parse_timeout(raw: str | None) -> float | None:
    if not raw or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None
