# Copyright 2025 Loopper-AI
# Configuration management for the agent proxy Lambda

from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import urlsplit

DEFAULT_AGENT_ENDPOINT = "http://llm-agent:8080"
DEFAULT_TIMEOUT_MS = 60000


@dataclass(frozen=True)
class Config:
    """Immutable configuration from environment variables."""

    agent_endpoint: str = DEFAULT_AGENT_ENDPOINT
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> Config:
        agent_endpoint = (os.environ.get("AGENT_ENDPOINT") or DEFAULT_AGENT_ENDPOINT).strip()
        try:
            timeout_ms = int(os.environ.get("AGENT_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))
        except ValueError:
            # Reported by validate()
            timeout_ms = 0
        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()

        return cls(
            agent_endpoint=agent_endpoint,
            timeout_ms=timeout_ms,
            log_level=log_level,
        )

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0

    def validate(self) -> tuple[bool, str | None]:
        if not self.agent_endpoint:
            return False, "AGENT_ENDPOINT not configured"
        parts = urlsplit(self.agent_endpoint)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            return False, f"AGENT_ENDPOINT must be an absolute http(s) URL: {self.agent_endpoint}"
        if self.timeout_ms <= 0:
            return False, "AGENT_TIMEOUT_MS must be a positive integer"
        return True, None
