"""Text helpers shared by the glossary and the classifier.

Phrase keys, word counting and log-safe truncation live here so every
component agrees on what a "word" and a "normalized phrase" are.
"""

from typing import List


def normalize_phrase(text: str) -> str:
    """Normalize text into a glossary key (lowercase, trimmed)."""
    if not text:
        return ""
    return text.lower().strip()


def split_words(text: str) -> List[str]:
    """Split text on runs of whitespace, dropping empty tokens."""
    if not text:
        return []
    return text.split()


def count_words(text: str) -> int:
    return len(split_words(text))


def safe_truncate(text: str, max_chars: int, suffix: str = "...") -> str:
    """Truncate text for log output, preferring a word boundary.

    Args:
        text: Text to truncate
        max_chars: Maximum characters (excluding suffix)
        suffix: Suffix to append if truncated

    Returns:
        Truncated text with suffix if needed
    """
    if not text or len(text) <= max_chars:
        return text

    truncated = text[:max_chars]

    # Look back a little for whitespace so words are not cut in half
    boundary = truncated.rfind(" ", max(0, max_chars - 20))
    if boundary > 0:
        truncated = truncated[:boundary].rstrip()

    return truncated + suffix
