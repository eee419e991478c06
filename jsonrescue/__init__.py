from .cleaning import clean_json_string
from .config import ExtractorConfig
from .errors import InvalidInputError, JsonRescueError, NoJsonFoundError
from .extractor import (
    JsonExtractor,
    extract_all_json,
    extract_and_parse_json,
    extract_json,
    load_json,
)
from .markdown import extract_from_markdown
from .models import Candidate, ExtractionOutcome, Strategy, ValueKind
from .patterns import find_basic_span, find_json_spans
from .repair import try_fix_json
from .validation import classify_json, is_json

__all__ = [
    "JsonExtractor",
    "ExtractorConfig",
    "extract_json",
    "extract_and_parse_json",
    "extract_all_json",
    "load_json",
    "is_json",
    "classify_json",
    "clean_json_string",
    "extract_from_markdown",
    "find_json_spans",
    "find_basic_span",
    "try_fix_json",
    "Candidate",
    "ExtractionOutcome",
    "Strategy",
    "ValueKind",
    "JsonRescueError",
    "InvalidInputError",
    "NoJsonFoundError",
]
