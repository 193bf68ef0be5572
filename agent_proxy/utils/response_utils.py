# Copyright 2025 Loopper-AI
# HTTP response utilities for API Gateway

from __future__ import annotations

from typing import Any

from .json_utils import strict_dumps

CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
}


def create_response(status_code: int, body: Any) -> dict[str, Any]:
    """
    Create a standardized API Gateway response.

    Args:
        status_code: HTTP status code
        body: Any JSON-serializable value; encoded into the response body

    Returns:
        API Gateway response dictionary
    """
    return {
        "statusCode": status_code,
        "headers": dict(CORS_HEADERS),
        "body": strict_dumps(body, default=str),
    }
