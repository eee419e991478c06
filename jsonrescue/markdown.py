from __future__ import annotations

import re

from .models import Candidate, Strategy
from .validation import is_json

_FENCE_MARKER_RE = re.compile(r"```json", re.IGNORECASE)
_FENCE = "```"


def contains_markdown_json(text: str) -> bool:
    return _FENCE_MARKER_RE.search(text) is not None


def extract_from_markdown(text: str) -> Candidate | None:
    """Return the cleaned body of the first ```json fence when it is valid.

    The body runs to the next ``` after the marker. Later fences are never
    consulted, even when the first one is invalid.
    """
    marker = _FENCE_MARKER_RE.search(text)
    if marker is None:
        return None

    end = text.find(_FENCE, marker.end())
    if end == -1:
        return None

    body = text[marker.end() : end].strip()
    if not body:
        return None

    candidate = Candidate(text=body, strategy=Strategy.MARKDOWN).cleaned()
    if not is_json(candidate.text):
        return None
    return candidate
