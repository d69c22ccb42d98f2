# Copyright 2025 Loopper-AI
# Utility modules

from .response_utils import BAD_GATEWAY_BODY, bad_gateway_response, create_response

__all__ = ["BAD_GATEWAY_BODY", "bad_gateway_response", "create_response"]
