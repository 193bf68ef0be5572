# Copyright 2025 Loopper-AI
# Utility modules

from .json_utils import strict_dumps, strict_loads
from .response_utils import CORS_HEADERS, create_response

__all__ = ["CORS_HEADERS", "create_response", "strict_dumps", "strict_loads"]
