from __future__ import annotations

import re

_LINE_COMMENT_RE = re.compile(r"//.*$", re.MULTILINE)


def clean_json_string(text: str) -> str:
    """Strip comments and per-line edge whitespace from a JSON candidate.

    This is a textual strip and is not aware of string literals, so a value
    such as ``"http://example.com"`` loses everything from ``//`` onwards.
    Blank lines are dropped. Passes are repeated until the text is stable,
    so cleaning twice always gives the same result as cleaning once.
    """
    if not isinstance(text, str) or not text:
        return text

    cleaned = _clean_once(text)
    while True:
        again = _clean_once(cleaned)
        if again == cleaned:
            return cleaned
        cleaned = again


def _clean_once(text: str) -> str:
    stripped = _LINE_COMMENT_RE.sub("", text)
    stripped = _strip_block_comments(stripped)
    lines = [line.strip() for line in stripped.split("\n")]
    return "\n".join(line for line in lines if line)


def _strip_block_comments(text: str) -> str:
    parts: list[str] = []
    position = 0
    while True:
        start = text.find("/*", position)
        if start == -1:
            break
        end = text.find("*/", start + 2)
        if end == -1:
            break
        parts.append(text[position:start])
        position = end + 2

    parts.append(text[position:])
    return "".join(parts)
