# Copyright 2025 Loopper-AI
# Client modules for external services

from .http_client import HttpClient

__all__ = ["HttpClient"]
