"""Interpreted model output.

The response interpreter reduces a raw model response to exactly one of
these variants; the output normalizer turns any of them into a
TranslationResult.
"""

from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field


class StructuredOutput(BaseModel):
    """Payload taken from the model's function call."""

    kind: Literal["structured"] = "structured"
    payload: Dict[str, Any] = Field(default_factory=dict)


class ScrapedOutput(BaseModel):
    """Payload parsed from a JSON object embedded in free text."""

    kind: Literal["scraped"] = "scraped"
    payload: Dict[str, Any] = Field(default_factory=dict)


class RawTextOutput(BaseModel):
    """Plain text passthrough.

    ``parse_error`` is set when an embedded object was found but could not
    be used; in that case the result is only a partial success.
    """

    kind: Literal["raw_text"] = "raw_text"
    text: str = ""
    parse_error: Optional[str] = None


InterpretedOutput = Union[StructuredOutput, ScrapedOutput, RawTextOutput]
