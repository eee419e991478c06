from __future__ import annotations

import json
from typing import Any

from .models import ValueKind


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def classify_json(value: Any) -> tuple[ValueKind, Any]:
    """Parse ``value`` and report which kind of JSON value it holds.

    Non-strings, blank strings and text that ``json.loads`` rejects are all
    ``PARSE_FAILURE``. ``NaN`` and ``Infinity`` are rejected as well.
    """
    if not isinstance(value, str):
        return ValueKind.PARSE_FAILURE, None

    stripped = value.strip()
    if not stripped:
        return ValueKind.PARSE_FAILURE, None

    try:
        parsed = json.loads(stripped, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return ValueKind.PARSE_FAILURE, None

    if isinstance(parsed, dict):
        return ValueKind.OBJECT, parsed
    if isinstance(parsed, list):
        return ValueKind.ARRAY, parsed
    if isinstance(parsed, str):
        return ValueKind.STRING, parsed
    if isinstance(parsed, bool):
        return ValueKind.BOOLEAN, parsed
    if parsed is None:
        return ValueKind.NULL, parsed
    return ValueKind.NUMBER, parsed


def parse_container(value: Any) -> dict[str, Any] | list[Any] | None:
    kind, parsed = classify_json(value)
    if not kind.is_container:
        return None
    return parsed


def is_json(value: Any) -> bool:
    """Return True only when ``value`` parses as a JSON object or array."""
    kind, _ = classify_json(value)
    return kind.is_container
