from __future__ import annotations

import json
import logging
from typing import Any

from .cleaning import clean_json_string
from .config import ExtractorConfig
from .errors import InvalidInputError, NoJsonFoundError
from .markdown import contains_markdown_json, extract_from_markdown
from .models import Candidate, ExtractionOutcome, Strategy
from .patterns import extract_with_patterns, find_json_spans
from .repair import try_fix_json
from .validation import classify_json

logger = logging.getLogger("jsonrescue")


class JsonExtractor:
    """Recover a JSON object or array from free-form model output.

    Strategies run in a fixed order and the first one that yields a valid
    container wins: the whole text, the first ```json fence, bracket-balanced
    spans, the basic first-span match, and finally textual repair.
    """

    def __init__(self, config: ExtractorConfig | None = None) -> None:
        self.config = config or ExtractorConfig()

    def locate(self, text: Any) -> ExtractionOutcome | None:
        if not self._accepts(text):
            return None

        candidate = self._first_candidate(text)
        if candidate is None:
            logger.debug("No JSON container found in %d characters of text", len(text))
            return None

        kind, value = classify_json(candidate.text)
        if not kind.is_container:
            return None

        logger.debug("Extracted JSON %s via %s", kind.value, candidate.strategy.value)
        return ExtractionOutcome(candidate=candidate, value=value, kind=kind)

    def extract_json(self, text: Any) -> str | None:
        outcome = self.locate(text)
        if outcome is None:
            return None
        return outcome.text

    def extract_and_parse_json(self, text: Any) -> dict[str, Any] | list[Any] | None:
        json_text = self.extract_json(text)
        if json_text is None:
            return None

        try:
            return json.loads(json_text)
        except (ValueError, RecursionError) as exc:
            logger.error("Extracted JSON failed to parse: %s", exc)
            return None

    def extract_all_json(self, text: Any) -> list[Any]:
        if not self._accepts(text):
            return []

        results: list[Any] = []
        for span in find_json_spans(text):
            cleaned = clean_json_string(span)
            kind, value = classify_json(cleaned)
            if not kind.is_container:
                logger.debug("Skipping span that is not a JSON container: %.40r", cleaned)
                continue

            results.append(value)

        return results

    def load_json(self, text: Any) -> dict[str, Any] | list[Any]:
        if not isinstance(text, str) or not text.strip():
            raise InvalidInputError("Expected a non-empty string of text.")

        outcome = self.locate(text)
        if outcome is None:
            raise NoJsonFoundError("No JSON object or array could be recovered from the text.")
        return outcome.value

    def _accepts(self, text: Any) -> bool:
        if not isinstance(text, str) or not text:
            return False

        limit = self.config.max_input_chars
        if limit is not None and len(text) > limit:
            logger.debug("Rejecting input of %d characters (limit %d)", len(text), limit)
            return False
        return True

    def _first_candidate(self, text: str) -> Candidate | None:
        whole = Candidate(text=text, strategy=Strategy.WHOLE_TEXT).cleaned()
        if classify_json(whole.text)[0].is_container:
            return whole

        if self.config.use_markdown and contains_markdown_json(text):
            fenced = extract_from_markdown(text)
            if fenced is not None:
                return fenced

        if self.config.use_patterns:
            matched = extract_with_patterns(text, use_basic=self.config.use_basic_pattern)
            if matched is not None:
                return matched

        if self.config.use_repair:
            return try_fix_json(text)

        return None


_DEFAULT_EXTRACTOR = JsonExtractor()


def extract_json(text: Any) -> str | None:
    return _DEFAULT_EXTRACTOR.extract_json(text)


def extract_and_parse_json(text: Any) -> dict[str, Any] | list[Any] | None:
    return _DEFAULT_EXTRACTOR.extract_and_parse_json(text)


def extract_all_json(text: Any) -> list[Any]:
    return _DEFAULT_EXTRACTOR.extract_all_json(text)


def load_json(text: Any) -> dict[str, Any] | list[Any]:
    return _DEFAULT_EXTRACTOR.load_json(text)
