from __future__ import annotations

import logging
import re
from typing import Callable

from .models import Candidate, Strategy
from .validation import is_json

logger = logging.getLogger("jsonrescue")

_TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")
_UNQUOTED_KEY_RE = re.compile(r"([{,]\s*)([a-zA-Z_$][a-zA-Z0-9_$]*)\s*:")


def _remove_trailing_commas(text: str) -> str:
    return _TRAILING_COMMA_RE.sub(r"\1", text)


def _single_to_double_quotes(text: str) -> str:
    return text.replace("'", '"')


def _quote_unquoted_keys(text: str) -> str:
    return _UNQUOTED_KEY_RE.sub(r'\1"\2":', text)


def _collapse_double_backslashes(text: str) -> str:
    return text.replace("\\\\", "\\")


REPAIR_STEPS: tuple[tuple[str, Callable[[str], str]], ...] = (
    ("trailing_commas", _remove_trailing_commas),
    ("single_quotes", _single_to_double_quotes),
    ("unquoted_keys", _quote_unquoted_keys),
    ("double_backslashes", _collapse_double_backslashes),
)


def try_fix_json(
    text: str,
    steps: tuple[tuple[str, Callable[[str], str]], ...] = REPAIR_STEPS,
) -> Candidate | None:
    """Apply the repair steps cumulatively, stopping at the first valid result.

    Each step works on the output of the previous one. A step that raises is
    skipped and the text accumulated so far is carried forward.
    """
    if not isinstance(text, str) or not text:
        return None

    fixed = text.strip()
    for name, fix in steps:
        try:
            attempt = fix(fixed)
        except Exception as exc:
            logger.debug("Repair step %s failed: %s", name, exc)
            continue

        if is_json(attempt):
            logger.debug("Repair step %s produced valid JSON", name)
            return Candidate(text=attempt, strategy=Strategy.REPAIRED)
        fixed = attempt

    return None
