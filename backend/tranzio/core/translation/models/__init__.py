"""Translation pipeline data models.

This module provides structured data models for the translation pipeline,
ensuring type safety and clear contracts between components.
"""

from .interpretation import (
    InterpretedOutput,
    RawTextOutput,
    ScrapedOutput,
    StructuredOutput,
)
from .prompt import Message, PromptBundle
from .request import PromptStrategyType, TranslationRequest
from .response import LLMResponse, StructuredCall, TokenUsage
from .result import ResultOrigin, TranslationResult, TranslationStatus

__all__ = [
    # Request models
    "PromptStrategyType",
    "TranslationRequest",
    # Prompt models
    "Message",
    "PromptBundle",
    # Response models
    "TokenUsage",
    "StructuredCall",
    "LLMResponse",
    # Interpretation variants
    "StructuredOutput",
    "ScrapedOutput",
    "RawTextOutput",
    "InterpretedOutput",
    # Result models
    "ResultOrigin",
    "TranslationResult",
    "TranslationStatus",
]
