"""Output normalization for translation results.

Whatever produced a result (glossary hit, function call, scraped JSON,
plain text, upstream failure), it passes through OutputNormalizer so that
callers always receive the same complete TranslationResult shape.
"""

import math
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ..models.result import ResultOrigin, TranslationResult, TranslationStatus

DEFAULT_SOURCE_LANGUAGE = "auto-detected"
UNKNOWN_ERROR = "Unknown error"

# Accepted spellings per canonical field; model payloads use camelCase
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "source_language": ("source_language", "sourceLanguage", "sourceLang"),
    "target_language": ("target_language", "targetLanguage", "targetLang"),
    "translated_text": ("translated_text", "translatedText"),
    "status": ("status",),
    "confidence": ("confidence",),
    "cultural_notes": ("cultural_notes", "culturalNotes"),
    "error": ("error",),
    "origin": ("origin",),
    "strategy": ("strategy",),
    "tokens_used": ("tokens_used", "tokensUsed"),
}


def pick_field(data: Mapping[str, Any], name: str) -> Any:
    """Return the first non-None value among a field's accepted spellings."""
    for key in FIELD_ALIASES.get(name, (name,)):
        value = data.get(key)
        if value is not None:
            return value
    return None


class OutputNormalizer:
    """Maps partial result fields into a canonical TranslationResult.

    Responsibilities:
    1. Fill every required field with its default when absent
    2. Coerce loosely-typed values (model-supplied confidence, status strings)
    3. Enforce the status/error invariant
    4. Stamp the result with the current time
    """

    def normalize(
        self,
        fields: Union[Mapping[str, Any], TranslationResult],
        target_language: Optional[str] = None,
    ) -> TranslationResult:
        """Build a complete result from partial fields.

        Args:
            fields: Partial result fields, or an existing result
            target_language: Caller-supplied target, used when fields lack one

        Returns:
            Normalized TranslationResult
        """
        if isinstance(fields, TranslationResult):
            fields = fields.model_dump()

        status = self._status(pick_field(fields, "status"))
        error = self._text(pick_field(fields, "error")) or None

        if status == TranslationStatus.ERROR and not error:
            error = UNKNOWN_ERROR
        elif status == TranslationStatus.SUCCESS:
            error = None

        return TranslationResult(
            source_language=self._text(pick_field(fields, "source_language"))
            or DEFAULT_SOURCE_LANGUAGE,
            target_language=self._text(pick_field(fields, "target_language"))
            or (target_language or ""),
            translated_text=self._text(pick_field(fields, "translated_text")),
            status=status,
            confidence=self._confidence(pick_field(fields, "confidence")),
            cultural_notes=self._text(pick_field(fields, "cultural_notes")),
            error=error,
            origin=self._origin(pick_field(fields, "origin")),
            strategy=self._text(pick_field(fields, "strategy")) or None,
            tokens_used=self._tokens(pick_field(fields, "tokens_used")),
        )

    def error_result(
        self,
        message: str,
        target_language: str,
        source_language: Optional[str] = None,
    ) -> TranslationResult:
        """Build an error result for an upstream failure."""
        return self.normalize(
            {
                "source_language": source_language or "unknown",
                "target_language": target_language,
                "translated_text": "",
                "status": TranslationStatus.ERROR,
                "error": message,
                "origin": ResultOrigin.UPSTREAM_ERROR,
            },
            target_language,
        )

    @staticmethod
    def _text(value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return str(value)

    @staticmethod
    def _status(value: Any) -> TranslationStatus:
        if isinstance(value, TranslationStatus):
            return value
        try:
            return TranslationStatus(str(value).strip().lower())
        except ValueError:
            return TranslationStatus.SUCCESS

    @staticmethod
    def _confidence(value: Any) -> float:
        if isinstance(value, bool) or value is None:
            return 1.0
        try:
            confidence = float(value)
        except (TypeError, ValueError, OverflowError):
            # int too large for a float counts as unreadable
            return 1.0
        if math.isnan(confidence):
            return 1.0
        return max(0.0, min(1.0, confidence))

    @staticmethod
    def _origin(value: Any) -> Optional[ResultOrigin]:
        if value is None:
            return None
        try:
            return ResultOrigin(value)
        except ValueError:
            return None

    @staticmethod
    def _tokens(value: Any) -> int:
        try:
            return max(0, int(value))
        except (TypeError, ValueError):
            return 0
