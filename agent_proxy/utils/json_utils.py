# Copyright 2025 Loopper-AI
# Strict JSON helpers: NaN and Infinity are neither accepted nor emitted

from __future__ import annotations

import json
from typing import Any


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def strict_loads(text: str | bytes) -> Any:
    """json.loads that rejects NaN, Infinity and -Infinity."""
    return json.loads(text, parse_constant=_reject_constant)


def strict_dumps(value: Any, **kwargs: Any) -> str:
    """json.dumps that raises ValueError for non-finite floats."""
    return json.dumps(value, allow_nan=False, **kwargs)
