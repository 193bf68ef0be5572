# Copyright 2025 Loopper-AI
# Client modules for the agent backend

from .agent_client import AgentClient
from .transport import PlainTransport, SecureTransport, resolve_target

__all__ = ["AgentClient", "PlainTransport", "SecureTransport", "resolve_target"]
