# Copyright 2025 Loopper-AI
# Data models for the agent proxy Lambda

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ForwardResult:
    """Result of relaying one request to the agent."""

    status_code: int
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class InboundRequest:
    """Method, path and parsed body extracted from an API Gateway event."""

    method: str
    path: str
    body: Any = None
