# Copyright 2025 Loopper-AI
# Tests for config, models and shared helpers

from __future__ import annotations

import json
from unittest.mock import patch


class TestForwardRequest:
    """Test suite for ForwardRequest."""

    def test_from_connect_event(self):
        from src.models import ForwardRequest

        event = {"requestContext": {"connectionId": "abc="}, "queryStringParameters": {"token": "t"}}
        request = ForwardRequest.from_connect_event(event)

        assert request.connection_id == "abc="
        assert request.token == "t"

    def test_from_connect_event_without_token(self):
        from src.models import ForwardRequest

        request = ForwardRequest.from_connect_event({"requestContext": {"connectionId": "abc="}})
        assert request.token == ""

    def test_from_message_event_defaults_body(self):
        from src.models import ForwardRequest

        request = ForwardRequest.from_message_event({"requestContext": {"connectionId": "c"}, "body": None})
        assert request.body == "{}"

    def test_connect_headers(self):
        from src.models import ForwardRequest

        headers = ForwardRequest(connection_id="C1", token="T1").headers(with_authorization=True)
        assert headers == {
            "Content-Type": "application/json",
            "X-Connection-Id": "C1",
            "Authorization": "Bearer T1",
        }

    def test_message_headers_have_no_authorization(self):
        from src.models import ForwardRequest

        headers = ForwardRequest(connection_id="C1", token="ignored").headers()
        assert headers == {"Content-Type": "application/json", "X-Connection-Id": "C1"}


class TestResponseUtils:
    """Test suite for response helpers."""

    def test_bad_gateway_body_is_compact_json(self):
        from src.utils import BAD_GATEWAY_BODY, bad_gateway_response

        assert BAD_GATEWAY_BODY == '{"message":"Bad Gateway: Backend Unreachable"}'
        assert json.loads(bad_gateway_response()["body"]) == {"message": "Bad Gateway: Backend Unreachable"}
        assert bad_gateway_response()["statusCode"] == 502

    def test_create_response_without_body(self):
        from src.utils import create_response

        assert create_response(204) == {"statusCode": 204}

    def test_create_response_keeps_empty_body(self):
        from src.utils import create_response

        assert create_response(200, "") == {"statusCode": 200, "body": ""}


class TestConfig:
    """Test suite for Config."""

    @patch.dict("os.environ", {"BACKEND_URL": " http://app/ws "}, clear=True)
    def test_from_environment(self):
        from src.config import Config

        cfg = Config.from_environment()
        assert cfg.backend_url == "http://app/ws"
        assert cfg.request_timeout is None
        assert cfg.log_level == "INFO"
        valid, err = cfg.validate()
        assert valid is True
        assert err is None

    @patch.dict("os.environ", {"BACKEND_URL": "http://app/ws", "REQUEST_TIMEOUT": "2.5", "LOG_LEVEL": "debug"})
    def test_timeout_and_log_level(self):
        from src.config import Config

        cfg = Config.from_environment()
        assert cfg.request_timeout == 2.5
        assert cfg.log_level == "DEBUG"

    @patch.dict("os.environ", {"BACKEND_URL": "http://app/ws", "REQUEST_TIMEOUT": "soon"})
    def test_unparseable_timeout_is_unset(self):
        from src.config import Config

        assert Config.from_environment().request_timeout is None

    @patch.dict("os.environ", {}, clear=True)
    def test_validate_fails_no_url(self):
        from src.config import Config

        valid, err = Config.from_environment().validate()
        assert valid is False
        assert "BACKEND_URL" in err
