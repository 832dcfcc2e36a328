"""Translation result models.

This module defines the canonical output of the translation pipeline. Every
path (glossary hit, structured model output, text fallback, upstream
failure) ends in the same TranslationResult shape.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class TranslationStatus(str, Enum):
    """Outcome of a resolution."""

    SUCCESS = "success"
    PARTIAL_SUCCESS = "partial_success"  # Usable text, structured parsing failed
    ERROR = "error"


class ResultOrigin(str, Enum):
    """Which path produced a result."""

    GLOSSARY = "glossary"
    GLOSSARY_COMPOSED = "glossary_composed"
    MODEL_STRUCTURED = "model_structured"
    MODEL_SCRAPED = "model_scraped"
    MODEL_TEXT = "model_text"
    UPSTREAM_ERROR = "upstream_error"


class TranslationResult(BaseModel):
    """Final translation output.

    This is the output contract of the translation pipeline.
    """

    source_language: str = Field(
        default="auto-detected", description="Source language, or 'auto-detected'"
    )
    target_language: str = Field(default="", description="Target language")
    translated_text: str = Field(default="", description="The translated text")
    status: TranslationStatus = Field(
        default=TranslationStatus.SUCCESS, description="Outcome of the resolution"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the result was produced",
    )
    confidence: float = Field(
        default=1.0, ge=0.0, le=1.0, description="Confidence between 0 and 1"
    )
    cultural_notes: str = Field(default="", description="Cultural or origin notes")
    error: Optional[str] = Field(default=None, description="Diagnostic message")

    # Processing metadata
    origin: Optional[ResultOrigin] = Field(
        default=None, description="Path that produced this result"
    )
    strategy: Optional[str] = Field(
        default=None, description="Prompt strategy used, if the model was called"
    )
    tokens_used: int = Field(default=0, description="Total tokens consumed")

    @property
    def is_success(self) -> bool:
        return self.status == TranslationStatus.SUCCESS

    def to_flat_dict(self) -> Dict[str, Any]:
        """Serialize as a flat JSON-compatible document."""
        return self.model_dump(mode="json")
