"""Translation request models.

This module defines the input data structures for the translation pipeline.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PromptStrategyType(str, Enum):
    """Supported prompt strategies."""

    MINIMAL = "minimal"  # Instruction only
    SINGLE_EXAMPLE = "single_example"  # Instruction plus one worked example
    MULTI_EXAMPLE = "multi_example"  # Several examples across language pairs
    STEPWISE_REASONING = "stepwise_reasoning"  # Explicit override only


class TranslationRequest(BaseModel):
    """A single resolution attempt.

    This is the PRIMARY input contract for the translation pipeline.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="The text to translate")
    target_language: str = Field(..., description="Target language identifier")
    source_language: Optional[str] = Field(
        default=None, description="Source language; auto-detected when omitted"
    )
    strategy: Optional[PromptStrategyType] = Field(
        default=None, description="Explicit prompt strategy override"
    )

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("text must not be empty")
        return value

    @field_validator("target_language")
    @classmethod
    def target_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("target_language must not be empty")
        return value.strip()

    @field_validator("source_language")
    @classmethod
    def blank_source_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()
