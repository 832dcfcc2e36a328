"""Glossary storage package."""

from .defaults import DEFAULT_GLOSSARY
from .store import GlossaryMapping, GlossaryStats, GlossaryStore

__all__ = [
    "DEFAULT_GLOSSARY",
    "GlossaryMapping",
    "GlossaryStats",
    "GlossaryStore",
]
