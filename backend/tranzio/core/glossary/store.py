"""File-backed glossary storage.

The glossary maps a normalized source phrase to its translations, keyed by
target language:

    {
      "thank you": {"Spanish": "gracias", "French": "merci"},
      ...
    }

A missing or unreadable file is not an error: the store falls back to the
built-in default glossary. Writes report failure through their return value
instead of raising, and a failed write drops the cached view so the next
reader goes back to disk.
"""

import asyncio
import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from tranzio.core.glossary.defaults import DEFAULT_GLOSSARY
from tranzio.utils.text import normalize_phrase

logger = logging.getLogger(__name__)

GlossaryMapping = Dict[str, Dict[str, str]]


class GlossaryStats(BaseModel):
    """Summary counts for the glossary."""

    total_entries: int = Field(default=0, description="Number of source phrases")
    total_translations: int = Field(
        default=0, description="Number of phrase/language pairs"
    )
    average_translations_per_entry: float = Field(
        default=0.0, description="Translations per phrase, rounded to 2 decimals"
    )
    languages: List[str] = Field(
        default_factory=list, description="Target languages present, sorted"
    )


class GlossaryStore:
    """Owns the glossary file and the in-memory view of it.

    One store instance is shared by every pipeline that should see the same
    glossary. Readers take a snapshot; writers go through ``add_entry`` which
    serializes writes made through this instance.
    """

    def __init__(self, path: Union[str, Path]):
        """Initialize the store.

        Args:
            path: Location of the JSON glossary file
        """
        self.path = Path(path)
        self._entries: Optional[GlossaryMapping] = None
        self._write_lock = asyncio.Lock()

    async def load(self) -> GlossaryMapping:
        """Read the glossary from disk, falling back to the defaults.

        Returns:
            A fresh copy of the loaded mapping
        """
        entries = await asyncio.to_thread(self._read_file)
        self._entries = entries
        return copy.deepcopy(entries)

    async def save(self, glossary: GlossaryMapping) -> bool:
        """Persist the glossary to disk.

        Args:
            glossary: Complete mapping to write

        Returns:
            True if the file was written, False otherwise
        """
        saved = await asyncio.to_thread(self._write_file, glossary)
        if saved:
            self._entries = copy.deepcopy(glossary)
        else:
            self._entries = None
        return saved

    async def snapshot(self) -> GlossaryMapping:
        """Get a consistent copy of the glossary for a single resolution."""
        return copy.deepcopy(await self._view())

    async def lookup(self, phrase: str, target_language: str) -> Optional[str]:
        """Look up one phrase for one target language."""
        entry = (await self._view()).get(normalize_phrase(phrase))
        if not entry:
            return None
        return entry.get(target_language)

    async def add_entry(
        self,
        phrase: str,
        translation: str,
        target_language: str,
        source_language: Optional[str] = None,
    ) -> bool:
        """Record a translation, overwriting any previous one.

        Args:
            phrase: Source text (normalized before storing)
            translation: Translated text
            target_language: Target language identifier
            source_language: Source language, used for logging only

        Returns:
            True if the entry was persisted
        """
        key = normalize_phrase(phrase)
        if not key or not translation or not target_language:
            logger.warning(
                "Refusing to add incomplete glossary entry: phrase=%r, target=%r",
                phrase,
                target_language,
            )
            return False

        async with self._write_lock:
            glossary = await self.load()
            glossary.setdefault(key, {})[target_language] = translation
            saved = await self.save(glossary)

        if saved:
            logger.info(
                "Added glossary entry %r -> %r (%s -> %s)",
                key,
                translation,
                source_language or "auto",
                target_language,
            )
        return saved

    async def stats(self) -> GlossaryStats:
        """Compute glossary statistics."""
        glossary = await self._view()
        total_entries = len(glossary)
        total_translations = sum(len(entry) for entry in glossary.values())
        languages = sorted({lang for entry in glossary.values() for lang in entry})

        average = round(total_translations / total_entries, 2) if total_entries else 0.0

        return GlossaryStats(
            total_entries=total_entries,
            total_translations=total_translations,
            average_translations_per_entry=average,
            languages=languages,
        )

    def invalidate(self) -> None:
        """Drop the cached view so the next read goes to disk."""
        self._entries = None

    async def _view(self) -> GlossaryMapping:
        if self._entries is None:
            await self.load()
        return self._entries if self._entries is not None else {}

    def _read_file(self) -> GlossaryMapping:
        if not self.path.exists():
            logger.info("No glossary file at %s, using default glossary", self.path)
            return copy.deepcopy(DEFAULT_GLOSSARY)

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            logger.warning(
                "Could not read glossary %s (%s), using default glossary", self.path, e
            )
            return copy.deepcopy(DEFAULT_GLOSSARY)

        if not isinstance(data, dict):
            logger.warning(
                "Glossary %s is not a JSON object, using default glossary", self.path
            )
            return copy.deepcopy(DEFAULT_GLOSSARY)

        return self._coerce(data)

    def _write_file(self, glossary: GlossaryMapping) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(glossary, f, ensure_ascii=False, indent=2)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to save glossary to %s: %s", self.path, e)
            return False
        return True

    @staticmethod
    def _coerce(data: Dict[str, Any]) -> GlossaryMapping:
        """Normalize phrase keys and drop malformed values."""
        entries: GlossaryMapping = {}
        for phrase, translations in data.items():
            key = normalize_phrase(str(phrase))
            if not key or not isinstance(translations, dict):
                continue
            clean = {
                str(lang): value
                for lang, value in translations.items()
                if isinstance(value, str)
            }
            entries.setdefault(key, {}).update(clean)
        return entries
