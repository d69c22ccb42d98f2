# Copyright 2025 Loopper-AI
# HTTP client for forwarding WebSocket events to the backend

from __future__ import annotations

import logging
import ssl
import urllib.error
import urllib.request
from urllib.parse import urlsplit

from ..models import ForwardResult

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = ("http", "https")


class HttpClient:
    """HTTP client for posting to the backend. Never raises."""

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout
        self._ssl_ctx = ssl.create_default_context()

    def post(self, url: str, headers: dict[str, str], payload: bytes | None = None) -> ForwardResult:
        """POST to url. Returns ForwardResult.

        urlopen raises HTTPError for non-2xx status codes. Those are still
        completed responses, so they come back as success with the backend's
        status and body. That includes 307/308 on POST, which urllib does
        not follow.
        """
        try:
            scheme = urlsplit(url).scheme.lower()
            if scheme not in ALLOWED_SCHEMES:
                raise ValueError(f"unsupported url scheme: {scheme!r}")
            req = urllib.request.Request(url, data=payload, headers=headers, method="POST")
            with urllib.request.urlopen(req, **self._urlopen_kwargs()) as resp:
                code = resp.getcode()
                body = resp.read().decode("utf-8", errors="replace")
                return ForwardResult(success=True, status_code=code, response_body=body)

        except urllib.error.HTTPError as exc:
            try:
                body = (exc.read() or b"").decode("utf-8", errors="replace")
            except Exception as read_exc:
                logger.error("Failed reading error body: code=%s error=%s", exc.code, read_exc)
                return ForwardResult(success=False, error=f"Error body read failed: {read_exc}")
            logger.info("Backend returned error status: code=%s", exc.code)
            return ForwardResult(success=True, status_code=exc.code, response_body=body)

        except urllib.error.URLError as exc:
            logger.error("URLError: reason=%s", exc.reason)
            return ForwardResult(success=False, error=f"URLError: {exc.reason}")

        except ValueError as exc:
            # Empty, malformed or non-http(s) BACKEND_URL
            logger.error("Invalid backend URL %r: %s", url, exc)
            return ForwardResult(success=False, error=f"Invalid URL: {exc}")

        except Exception as exc:
            logger.exception("Unexpected HTTP error: %s", exc)
            return ForwardResult(success=False, error=str(exc))

    def _urlopen_kwargs(self) -> dict:
        kwargs: dict = {"context": self._ssl_ctx}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        return kwargs
