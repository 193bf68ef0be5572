# Copyright 2025 Loopper-AI
# Lambda proxy relaying API Gateway requests to the LLM agent

from .handler import handle, lambda_handler

__all__ = ["handle", "lambda_handler"]
