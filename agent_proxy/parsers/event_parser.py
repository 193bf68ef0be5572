# Copyright 2025 Loopper-AI
# API Gateway HTTP API (payload v2) event parser

from __future__ import annotations

import base64
from typing import Any

from ..models import InboundRequest
from ..utils.json_utils import strict_loads


class EventParser:
    """Parser for API Gateway / Function URL invocation events."""

    @staticmethod
    def get_method(event: dict[str, Any]) -> str:
        http = (event.get("requestContext") or {}).get("http") or {}
        method = http.get("method")
        if not method:
            raise ValueError("Event missing requestContext.http.method")
        return method

    @staticmethod
    def get_path(event: dict[str, Any]) -> str:
        path = event.get("rawPath")
        if path is None:
            raise ValueError("Event missing rawPath")
        return path

    @staticmethod
    def get_body(event: dict[str, Any]) -> Any:
        """Parsed JSON body, or None when the event has no body.

        Raises ValueError for a malformed body, including NaN and Infinity.
        """
        raw_body = event.get("body")
        if not raw_body:
            return None
        if event.get("isBase64Encoded"):
            raw_body = base64.b64decode(raw_body).decode("utf-8", errors="replace")
        return strict_loads(raw_body)

    @classmethod
    def to_request(cls, event: dict[str, Any]) -> InboundRequest:
        return InboundRequest(
            method=cls.get_method(event),
            path=cls.get_path(event),
            body=cls.get_body(event),
        )
