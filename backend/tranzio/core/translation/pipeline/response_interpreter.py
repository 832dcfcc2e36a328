"""Response interpretation for model output.

The model is asked to answer through the ``translate_text`` function, but
nothing forces it to. Interpretation therefore degrades in three steps:

1. a function call carrying the required fields is used as-is
2. otherwise the first balanced ``{...}`` object in the text is parsed
3. otherwise the trimmed text itself is the translation

Each step yields one InterpretedOutput variant, and a single conversion
turns the variant into a normalized TranslationResult.
"""

import json
import logging
from typing import Any, Dict, Optional

from tranzio.core.prompts.output_schemas import (
    TRANSLATE_FUNCTION_NAME,
    validate_function_args,
)
from tranzio.utils.text import safe_truncate

from ..models.interpretation import (
    InterpretedOutput,
    RawTextOutput,
    ScrapedOutput,
    StructuredOutput,
)
from ..models.response import LLMResponse
from ..models.result import ResultOrigin, TranslationResult, TranslationStatus
from .output_processor import DEFAULT_SOURCE_LANGUAGE, OutputNormalizer, pick_field

logger = logging.getLogger(__name__)

PARSE_FAILURE_NOTE = "Failed to parse structured response"
EMPTY_RESPONSE_NOTE = "Model returned an empty response"


def find_json_span(text: str) -> Optional[str]:
    """Find the first balanced ``{...}`` span in text.

    Braces inside double-quoted strings are ignored. If an opening brace
    never closes, scanning resumes at the next opening brace.

    Args:
        text: Free text that may embed a JSON object

    Returns:
        The span including both braces, or None
    """
    start = text.find("{")
    while start != -1:
        depth = 0
        in_string = False
        escaped = False

        for i in range(start, len(text)):
            char = text[i]
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
            elif char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    return text[start : i + 1]

        start = text.find("{", start + 1)

    return None


class ResponseInterpreter:
    """Turns raw model responses into translation results."""

    def __init__(self, normalizer: Optional[OutputNormalizer] = None):
        self.normalizer = normalizer or OutputNormalizer()

    def interpret(
        self,
        response: LLMResponse,
        target_language: str,
        source_language: Optional[str] = None,
    ) -> TranslationResult:
        """Interpret a model response.

        Args:
            response: Raw response from the gateway
            target_language: Requested target language
            source_language: Requested source language, if any

        Returns:
            Normalized TranslationResult
        """
        output = self.extract(response)
        return self.to_result(output, target_language, source_language)

    def extract(self, response: LLMResponse) -> InterpretedOutput:
        """Reduce a response to exactly one interpretation variant."""
        call = response.structured_call
        if call is not None:
            if call.name != TRANSLATE_FUNCTION_NAME:
                logger.warning(
                    "Ignoring call to unknown function %r, falling back to text parsing",
                    call.name,
                )
            elif validate_function_args(call.args):
                return StructuredOutput(payload=dict(call.args))
            else:
                logger.warning(
                    "Function call %r lacks required fields, falling back to text parsing",
                    call.name,
                )

        text = (response.content or "").strip()
        span = find_json_span(text)
        if span is None:
            return RawTextOutput(text=text)

        try:
            payload = json.loads(span)
        except json.JSONDecodeError as e:
            logger.warning("Embedded JSON could not be parsed: %s", e)
            return RawTextOutput(text=text, parse_error=PARSE_FAILURE_NOTE)

        if not isinstance(payload, dict) or not self._payload_text(payload):
            logger.warning(
                "Embedded JSON has no translated text: %s", safe_truncate(span, 120)
            )
            return RawTextOutput(text=text, parse_error=PARSE_FAILURE_NOTE)

        return ScrapedOutput(payload=payload)

    def to_result(
        self,
        output: InterpretedOutput,
        target_language: str,
        source_language: Optional[str] = None,
    ) -> TranslationResult:
        """Convert an interpretation variant into a result."""
        if isinstance(output, StructuredOutput):
            fields = self._payload_fields(output.payload, target_language, source_language)
            fields["origin"] = ResultOrigin.MODEL_STRUCTURED
        elif isinstance(output, ScrapedOutput):
            fields = self._payload_fields(output.payload, target_language, source_language)
            fields["origin"] = ResultOrigin.MODEL_SCRAPED
        elif output.parse_error:
            fields = {
                "source_language": source_language or "unknown",
                "target_language": target_language,
                "translated_text": output.text,
                "status": TranslationStatus.PARTIAL_SUCCESS,
                "error": output.parse_error,
                "origin": ResultOrigin.MODEL_TEXT,
            }
        elif not output.text:
            return self.normalizer.error_result(
                EMPTY_RESPONSE_NOTE, target_language, source_language
            )
        else:
            fields = {
                "source_language": source_language or DEFAULT_SOURCE_LANGUAGE,
                "target_language": target_language,
                "translated_text": output.text,
                "status": TranslationStatus.SUCCESS,
                "origin": ResultOrigin.MODEL_TEXT,
            }

        return self.normalizer.normalize(fields, target_language)

    @staticmethod
    def _payload_text(payload: Dict[str, Any]) -> str:
        value = pick_field(payload, "translated_text")
        return value.strip() if isinstance(value, str) else ""

    @staticmethod
    def _payload_fields(
        payload: Dict[str, Any],
        target_language: str,
        source_language: Optional[str],
    ) -> Dict[str, Any]:
        return {
            "source_language": pick_field(payload, "source_language") or source_language,
            "target_language": pick_field(payload, "target_language") or target_language,
            "translated_text": pick_field(payload, "translated_text"),
            "confidence": pick_field(payload, "confidence"),
            "cultural_notes": pick_field(payload, "cultural_notes"),
            "status": TranslationStatus.SUCCESS,
        }
