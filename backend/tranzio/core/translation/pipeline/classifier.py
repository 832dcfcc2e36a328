"""Text complexity classification.

Picks a prompt strategy from coarse features of the input text. The
classifier is an interface so the heuristic below can be replaced (for
example by a model-based classifier) without touching the pipeline.

Known limitation: idioms are recognized only from a small literal
allow-list. Anything not on the list is treated as ordinary text.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional

from tranzio.utils.text import count_words

from ..models.request import PromptStrategyType


@dataclass(frozen=True)
class ComplexityProfile:
    """Features extracted from a text."""

    word_count: int
    has_idiom: bool
    has_special_chars: bool
    has_numbers: bool

    def to_dict(self) -> dict:
        return {
            "word_count": self.word_count,
            "has_idiom": self.has_idiom,
            "has_special_chars": self.has_special_chars,
            "has_numbers": self.has_numbers,
        }


class ComplexityClassifier(ABC):
    """Chooses a prompt strategy for a text."""

    @abstractmethod
    def classify(self, text: str) -> PromptStrategyType:
        """Select a prompt strategy.

        Args:
            text: Input text

        Returns:
            Strategy to render the request with
        """
        pass


class HeuristicComplexityClassifier(ComplexityClassifier):
    """Word-count and pattern based classifier.

    Rules, first match wins:
    1. <= 5 words, no idiom, no special characters -> minimal
    2. <= 15 words, no idiom -> single example
    3. otherwise -> multi example

    Stepwise reasoning is never chosen here; it is an explicit override.
    """

    MINIMAL_MAX_WORDS = 5
    SINGLE_EXAMPLE_MAX_WORDS = 15

    IDIOM_PATTERNS = (
        "it's raining cats and dogs",
        "early bird",
        "actions speak",
        "book by its cover",
    )

    # Anything besides word characters, whitespace and common punctuation
    SPECIAL_CHARS_RE = re.compile(r"[^\w\s.,!?;:'\"()]")
    NUMBER_RE = re.compile(r"\d")

    def __init__(self, idiom_patterns: Optional[Iterable[str]] = None):
        patterns = tuple(idiom_patterns) if idiom_patterns is not None else self.IDIOM_PATTERNS
        self._idiom_re = (
            re.compile("|".join(re.escape(p) for p in patterns), re.IGNORECASE)
            if patterns
            else None
        )

    def analyze(self, text: str) -> ComplexityProfile:
        """Extract the features the rules look at."""
        text = text or ""
        return ComplexityProfile(
            word_count=count_words(text),
            has_idiom=bool(self._idiom_re and self._idiom_re.search(text)),
            has_special_chars=bool(self.SPECIAL_CHARS_RE.search(text)),
            has_numbers=bool(self.NUMBER_RE.search(text)),
        )

    def classify(self, text: str) -> PromptStrategyType:
        profile = self.analyze(text)

        if (
            profile.word_count <= self.MINIMAL_MAX_WORDS
            and not profile.has_idiom
            and not profile.has_special_chars
        ):
            return PromptStrategyType.MINIMAL
        if profile.word_count <= self.SINGLE_EXAMPLE_MAX_WORDS and not profile.has_idiom:
            return PromptStrategyType.SINGLE_EXAMPLE
        return PromptStrategyType.MULTI_EXAMPLE
