"""Glossary-backed retrieval.

The resolver is consulted before any model call. It answers from the
glossary either with an exact phrase hit or, when every word of the text is
known on its own, with a word-by-word composition. Anything else is a miss
and the pipeline moves on to the model.
"""

import logging
from typing import Optional

from tranzio.core.glossary.store import GlossaryMapping, GlossaryStore
from tranzio.utils.text import normalize_phrase, split_words

from ..models.result import ResultOrigin, TranslationResult, TranslationStatus
from .output_processor import DEFAULT_SOURCE_LANGUAGE, OutputNormalizer

logger = logging.getLogger(__name__)


class RetrievalResolver:
    """Resolves requests from the glossary without calling the model."""

    EXACT_CONFIDENCE = 1.0
    COMPOSED_CONFIDENCE = 0.9

    EXACT_NOTE = "Retrieved from local glossary"
    COMPOSED_NOTE = "Constructed from individual word translations"

    def __init__(
        self,
        store: GlossaryStore,
        normalizer: Optional[OutputNormalizer] = None,
    ):
        self.store = store
        self.normalizer = normalizer or OutputNormalizer()

    async def resolve(
        self,
        text: str,
        target_language: str,
        source_language: Optional[str] = None,
    ) -> Optional[TranslationResult]:
        """Try to answer a request from the glossary.

        Args:
            text: Text to translate
            target_language: Target language identifier
            source_language: Optional source language

        Returns:
            A success result on a hit, None on a miss. Never raises.
        """
        try:
            phrase = normalize_phrase(text)
            if not phrase or not target_language:
                return None

            glossary = await self.store.snapshot()
            return self.match(glossary, phrase, target_language, source_language)
        except Exception as e:
            logger.error("Glossary lookup failed, falling through to model: %s", e)
            return None

    def match(
        self,
        glossary: GlossaryMapping,
        phrase: str,
        target_language: str,
        source_language: Optional[str] = None,
    ) -> Optional[TranslationResult]:
        """Match a normalized phrase against one glossary snapshot."""
        entry = glossary.get(phrase)
        if entry and entry.get(target_language):
            translation = entry[target_language]
            logger.info("Glossary hit: %r -> %r (%s)", phrase, translation, target_language)
            return self.normalizer.normalize(
                {
                    "source_language": source_language or DEFAULT_SOURCE_LANGUAGE,
                    "target_language": target_language,
                    "translated_text": translation,
                    "status": TranslationStatus.SUCCESS,
                    "confidence": self.EXACT_CONFIDENCE,
                    "cultural_notes": self.EXACT_NOTE,
                    "origin": ResultOrigin.GLOSSARY,
                },
                target_language,
            )

        composed = self._compose(glossary, phrase, target_language)
        if composed is not None:
            logger.info("Glossary composed hit: %r -> %r (%s)", phrase, composed, target_language)
            # Composition never inherits the caller's source language
            return self.normalizer.normalize(
                {
                    "source_language": DEFAULT_SOURCE_LANGUAGE,
                    "target_language": target_language,
                    "translated_text": composed,
                    "status": TranslationStatus.SUCCESS,
                    "confidence": self.COMPOSED_CONFIDENCE,
                    "cultural_notes": self.COMPOSED_NOTE,
                    "origin": ResultOrigin.GLOSSARY_COMPOSED,
                },
                target_language,
            )

        logger.debug("Glossary miss: %r (%s)", phrase, target_language)
        return None

    @staticmethod
    def _compose(
        glossary: GlossaryMapping, phrase: str, target_language: str
    ) -> Optional[str]:
        words = split_words(phrase)
        if not words:
            return None

        translations = []
        for word in words:
            entry = glossary.get(word)
            if not entry or not entry.get(target_language):
                return None
            translations.append(entry[target_language])

        return " ".join(translations)
