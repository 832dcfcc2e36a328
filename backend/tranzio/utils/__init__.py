"""Utility modules for the tranzio backend."""

from .text import count_words, normalize_phrase, safe_truncate, split_words

__all__ = ["count_words", "normalize_phrase", "safe_truncate", "split_words"]
