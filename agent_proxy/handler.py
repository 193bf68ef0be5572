# Copyright 2025 Loopper-AI
# Lambda handler: API Gateway request → LLM agent → API Gateway response
#
# Every outcome is returned as a response, never raised:
#   agent status  → relayed verbatim with the agent's body
#   unreachable   → 503, timeout → 504, anything else → 500

from __future__ import annotations

import asyncio
import json
import logging
from functools import lru_cache
from typing import Any

from .clients import AgentClient
from .config import Config
from .exceptions import ForwardError
from .parsers import EventParser
from .utils import create_response

logger = logging.getLogger()


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Config is read once per process."""
    return Config.from_environment()


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """API Gateway event → forward to agent → API Gateway response."""
    config = get_config()
    logger.setLevel(getattr(logging, config.log_level, logging.INFO))

    request_id = getattr(context, "aws_request_id", "") if context else ""
    logger.info("lambda_handler started request_id=%s", request_id)

    return asyncio.run(handle(event, config))


async def handle(event: dict[str, Any], config: Config, client: AgentClient | None = None) -> dict[str, Any]:
    """Forward one API Gateway event to the agent; every outcome is returned as a response."""
    _log_event(event)

    try:
        is_valid, err = config.validate()
        if not is_valid:
            logger.error("Configuration error: %s", err)
            raise ForwardError.internal_error(err)

        request = EventParser.to_request(event)
        logger.info("%s %s", request.method, request.path)

        result = await (client or AgentClient(config)).forward(request.method, request.path, request.body)

    except ForwardError as exc:
        logger.warning("Forward failed: status=%s error=%s message=%s", exc.status_code, exc.error_tag, exc.message)
        return create_response(exc.status_code or 500, exc.to_dict())

    except Exception as exc:
        logger.exception("Error: %s", exc)
        return create_response(500, {"error": "Internal server error", "message": str(exc)})

    return create_response(result.status_code, result.body)


def _log_event(event: Any) -> None:
    try:
        logger.info("Event: %s", json.dumps(event, indent=2, default=str))
    except (TypeError, ValueError):
        logger.info("Event: %r", event)
