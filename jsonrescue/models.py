from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from .cleaning import clean_json_string


class Strategy(str, Enum):
    WHOLE_TEXT = "whole_text"
    MARKDOWN = "markdown"
    PRECISE_PATTERN = "precise_pattern"
    BASIC_PATTERN = "basic_pattern"
    REPAIRED = "repaired"


class ValueKind(Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    PARSE_FAILURE = "parse_failure"

    @property
    def is_container(self) -> bool:
        return self in (ValueKind.OBJECT, ValueKind.ARRAY)


class Candidate(BaseModel):
    """A substring proposed by one strategy as a possible JSON container."""

    model_config = ConfigDict(frozen=True)

    text: str
    strategy: Strategy

    def cleaned(self) -> Candidate:
        return Candidate(text=clean_json_string(self.text), strategy=self.strategy)


class ExtractionOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    candidate: Candidate
    value: Any
    kind: ValueKind

    @property
    def text(self) -> str:
        return self.candidate.text

    @property
    def strategy(self) -> Strategy:
        return self.candidate.strategy
