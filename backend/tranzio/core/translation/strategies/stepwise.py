"""Stepwise-reasoning translation strategy.

Walks the model through an ordered list of reasoning steps before it
commits to a translation. Only selected by explicit override.
"""

from typing import List

from .base import PromptStrategy
from ..models.request import PromptStrategyType, TranslationRequest


class StepwiseReasoningStrategy(PromptStrategy):
    """Ordered reasoning steps followed by the final translation."""

    strategy_type = PromptStrategyType.STEPWISE_REASONING

    STEPS = (
        "First, identify the source language and any cultural context",
        "Break down the text into logical components",
        "Identify any idioms, metaphors, or cultural references",
        "Consider the appropriate translation strategy for each component",
        "Provide the final translation",
    )

    def header(self, request: TranslationRequest) -> str:
        return (
            f"You are a professional translator with expertise in "
            f"{request.target_language}. {self.source_instruction(request)}"
        )

    def guidance(self, request: TranslationRequest) -> List[str]:
        steps = "\n".join(f"{i}. {step}" for i, step in enumerate(self.STEPS, start=1))
        return [
            f"Please translate the following text to {request.target_language} "
            f"by following these steps:\n\n{steps}"
        ]

    def task(self, request: TranslationRequest) -> str:
        return f"Text to translate: {self.quote(request.text)}"

    def closing(self, request: TranslationRequest) -> str:
        return (
            "Think through these steps before answering, then respond with only "
            "the final translated text, without your reasoning or any formatting."
        )
