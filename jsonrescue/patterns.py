"""Locate substrings of free text that look like JSON objects or arrays.

Both matchers run in time linear in the input, so bracket-heavy input cannot
cause the runaway backtracking a nested regular expression would.
"""

from __future__ import annotations

from .models import Candidate, Strategy
from .validation import is_json

_OPENERS = {"{": "}", "[": "]"}
_CLOSERS = {"}": "{", "]": "["}

# caps the characters rescanned after unclosed openers, as a multiple of the
# input length
_RESCAN_PASSES = 4


def find_json_spans(text: str) -> list[str]:
    """Return the outermost balanced ``{...}``/``[...]`` spans, left to right.

    Spans never overlap. Brackets inside double-quoted strings of an open
    container are ignored. When an outer container never closes, the
    balanced containers inside it are still reported, and an opener in prose
    that never closes does not hide the JSON that follows it.
    """
    if not isinstance(text, str) or not text:
        return []

    spans: list[str] = []
    last_end = -1
    for start, end in sorted(_balanced_pairs(text)):
        if start <= last_end:
            continue
        spans.append(text[start : end + 1])
        last_end = end
    return spans


def _balanced_pairs(text: str) -> set[tuple[int, int]]:
    pairs: set[tuple[int, int]] = set()
    budget = _RESCAN_PASSES * len(text)
    position = 0

    while True:
        unclosed, saw_string = _scan_from(text, position, pairs)
        if unclosed is None or not saw_string:
            return pairs

        # string state after an opener that never closed is unreliable
        position = unclosed + 1
        budget -= len(text) - position
        if budget < 0:
            return pairs


def _scan_from(
    text: str,
    position: int,
    pairs: set[tuple[int, int]],
) -> tuple[int | None, bool]:
    """Record balanced pairs from ``position`` onwards.

    Returns the index of the earliest opener still open at the end of the
    text, and whether a string literal was entered while it was open.
    """
    stack: list[tuple[int, str]] = []
    in_string = False
    escaped = False
    saw_string = False

    for idx in range(position, len(text)):
        char = text[idx]

        if not stack:
            if char in _OPENERS:
                stack.append((idx, char))
                saw_string = False
            continue

        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
            saw_string = True
        elif char in _OPENERS:
            stack.append((idx, char))
        elif char in _CLOSERS:
            start, opening = stack.pop()
            if _CLOSERS[char] != opening:
                # mismatched closer abandons every open container
                stack.clear()
                continue
            pairs.add((start, idx))

    if not stack:
        return None, False
    return stack[0][0], saw_string


def find_basic_span(text: str) -> str | None:
    """Return the first ``{...}`` or ``[...]`` ending at its first closer."""
    if not isinstance(text, str) or not text:
        return None

    best: tuple[int, int] | None = None
    for opening, closing in _OPENERS.items():
        start = text.find(opening)
        if start == -1:
            continue
        end = text.find(closing, start + 1)
        if end == -1:
            continue
        if best is None or start < best[0]:
            best = (start, end)

    if best is None:
        return None
    return text[best[0] : best[1] + 1]


def extract_with_patterns(text: str, use_basic: bool = True) -> Candidate | None:
    for span in find_json_spans(text):
        candidate = Candidate(text=span, strategy=Strategy.PRECISE_PATTERN).cleaned()
        if is_json(candidate.text):
            return candidate

    if not use_basic:
        return None

    basic = find_basic_span(text)
    if basic is None:
        return None

    candidate = Candidate(text=basic, strategy=Strategy.BASIC_PATTERN).cleaned()
    if is_json(candidate.text):
        return candidate
    return None
