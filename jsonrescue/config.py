from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class ExtractorConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    use_markdown: bool = True
    use_patterns: bool = True
    use_basic_pattern: bool = True
    use_repair: bool = True

    max_input_chars: int | None = None

    @field_validator("max_input_chars")
    @classmethod
    def validate_max_input_chars(cls, value: int | None) -> int | None:
        if value is None:
            return None
        if value < 1:
            raise ValueError("max_input_chars must be >= 1")
        return value
