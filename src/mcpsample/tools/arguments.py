"""Typed extraction of values from a raw ``arguments`` mapping.

Values arrive as decoded JSON (string, number, boolean, null, list, dict).
Each helper either returns the requested Python type or raises
:class:`InvalidArgumentsError`; ``null`` is treated the same as a missing key.
"""

from __future__ import annotations

import json
import math
from typing import Any

from mcpsample.protocol.errors import InvalidArgumentsError


def format_number(value: float) -> str:
    """Render a number the way it reads naturally: ``15``, ``3.5``, ``-0.25``."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def coerce_text(value: Any) -> str:
    """Convert any JSON value to its text form."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return format_number(value)
    return json.dumps(value, separators=(",", ":"))


def require_text(arguments: dict[str, Any], key: str) -> str:
    value = arguments.get(key)
    if value is None:
        raise InvalidArgumentsError(f"Missing required argument: {key}")
    return coerce_text(value)


def optional_text(arguments: dict[str, Any], key: str, default: str) -> str:
    value = arguments.get(key)
    if value is None:
        return default
    return coerce_text(value)


def require_number(arguments: dict[str, Any], key: str) -> float:
    """Extract a finite number, accepting numeric strings such as ``"7.5"``."""
    value = arguments.get(key)
    if value is None:
        raise InvalidArgumentsError(f"Missing required argument: {key}")
    if isinstance(value, bool):
        raise InvalidArgumentsError(f"Invalid numeric argument '{key}': {value!r}")
    if isinstance(value, int | float | str):
        try:
            number = float(value.strip() if isinstance(value, str) else value)
        except (ValueError, OverflowError):
            number = math.nan
        if math.isfinite(number):
            return number
    raise InvalidArgumentsError(f"Invalid numeric argument '{key}': {value!r}")


def optional_bool(arguments: dict[str, Any], key: str, default: bool) -> bool:
    value = arguments.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise InvalidArgumentsError(f"Invalid boolean argument '{key}': {value!r}")
