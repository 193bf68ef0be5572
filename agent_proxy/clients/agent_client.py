# Copyright 2025 Loopper-AI
# HTTP client for forwarding requests to the LLM agent

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from ..config import Config
from ..exceptions import ForwardError
from ..models import ForwardResult
from ..utils.json_utils import strict_dumps, strict_loads
from .transport import Target, resolve_target

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class AgentClient:
    """Relays a single request to the agent and normalizes the outcome."""

    def __init__(self, config: Config):
        self.base_url = config.agent_endpoint
        self.timeout = config.timeout_seconds

    async def forward(self, method: str, path: str, body: Any = None) -> ForwardResult:
        """Send method/path/body to the agent. Returns ForwardResult.

        Backend status codes are passed through untouched; only failures to
        complete the round trip raise ForwardError (503, 504 or 500).
        Any body other than None is sent, including falsy values such as 0,
        false or "". Non-finite floats are rejected as an internal error.
        """
        try:
            target = resolve_target(self.base_url, path)
            content = strict_dumps(body).encode("utf-8") if body is not None else None
        except (TypeError, ValueError, httpx.InvalidURL) as exc:
            logger.error("Request construction failed: %s", exc)
            raise ForwardError.internal_error(str(exc)) from exc

        # wait_for bounds connect + response; on expiry the request task is
        # cancelled and the client closes its connection.
        try:
            return await asyncio.wait_for(self._send(target, method, content), timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.error("Timeout: url=%s timeout=%ss", target.url, self.timeout)
            raise ForwardError.gateway_timeout() from exc
        except httpx.RequestError as exc:
            logger.error("Request error: url=%s error=%s", target.url, exc)
            raise ForwardError.service_unavailable(str(exc) or type(exc).__name__) from exc

    async def _send(self, target: Target, method: str, content: bytes | None) -> ForwardResult:
        async with target.transport.open_client(self.timeout) as client:
            response = await client.request(method, target.url, content=content, headers=JSON_HEADERS)

        logger.info("Agent responded: status=%s url=%s", response.status_code, target.url)
        return ForwardResult(
            status_code=response.status_code,
            body=parse_body(response.text),
            headers=dict(response.headers),
        )


def parse_body(text: str) -> Any:
    """Parsed JSON when possible, otherwise the raw text (NaN/Infinity stay raw)."""
    try:
        return strict_loads(text)
    except ValueError:
        return text
