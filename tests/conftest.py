# Copyright 2025 Loopper-AI
# Shared test fixtures

from __future__ import annotations

import json
from typing import Any
from unittest.mock import MagicMock

import pytest

from agent_proxy.config import Config


def make_event(method: str = "POST", path: str = "/chat", body: Any = None, raw_body: str | None = None) -> dict:
    """Build a minimal API Gateway HTTP API (v2) event."""
    if raw_body is None and body is not None:
        raw_body = json.dumps(body)
    return {
        "version": "2.0",
        "rawPath": path,
        "requestContext": {"http": {"method": method, "path": path}, "requestId": "req-001"},
        "body": raw_body,
        "isBase64Encoded": False,
    }


def make_context(request_id: str = "test-req-001") -> MagicMock:
    ctx = MagicMock()
    ctx.aws_request_id = request_id
    return ctx


@pytest.fixture
def config() -> Config:
    return Config(agent_endpoint="http://llm-agent:8080", timeout_ms=60000, log_level="INFO")


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Config is cached per process; reset it around each test."""
    from agent_proxy.handler import get_config

    get_config.cache_clear()
    yield
    get_config.cache_clear()
