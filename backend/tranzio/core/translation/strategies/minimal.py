"""Minimal translation strategy: instruction only."""

from typing import List

from .base import PromptStrategy
from ..models.request import PromptStrategyType, TranslationRequest


class MinimalStrategy(PromptStrategy):
    """Plain instruction without examples.

    Suitable for short, literal text where the model can infer the expected
    output from the instruction alone.
    """

    strategy_type = PromptStrategyType.MINIMAL

    def guidance(self, request: TranslationRequest) -> List[str]:
        return []
