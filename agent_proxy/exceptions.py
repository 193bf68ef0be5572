# Copyright 2025 Loopper-AI
# Exceptions raised while forwarding requests to the agent

from __future__ import annotations

from typing import Any, Literal

ErrorTag = Literal["service_unavailable", "gateway_timeout", "internal_error"]

ERROR_LABELS: dict[str, str] = {
    "service_unavailable": "Service unavailable",
    "gateway_timeout": "Gateway timeout",
    "internal_error": "Internal server error",
}

TIMEOUT_MESSAGE = "Request to agent timed out"


class ForwardError(Exception):
    """Failed round trip to the agent.

    Attributes:
        status_code: HTTP status code returned to the caller.
        error_tag: Machine-readable failure category.
        message: Human-readable error text.
    """

    def __init__(self, status_code: int, error_tag: ErrorTag, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.error_tag = error_tag
        self.message = message

    @property
    def label(self) -> str:
        return ERROR_LABELS.get(self.error_tag, ERROR_LABELS["internal_error"])

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response body."""
        return {"error": self.label, "message": self.message}

    @classmethod
    def service_unavailable(cls, message: str) -> ForwardError:
        return cls(503, "service_unavailable", message)

    @classmethod
    def gateway_timeout(cls) -> ForwardError:
        return cls(504, "gateway_timeout", TIMEOUT_MESSAGE)

    @classmethod
    def internal_error(cls, message: str) -> ForwardError:
        return cls(500, "internal_error", message)
