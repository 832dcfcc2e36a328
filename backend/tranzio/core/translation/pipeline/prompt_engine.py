"""Prompt engine with strategy pattern.

This module provides the PromptEngine class that routes to the prompt
strategy chosen for a request.
"""

from typing import Dict, Type

from ..models.prompt import PromptBundle
from ..models.request import PromptStrategyType, TranslationRequest
from ..strategies import (
    PromptStrategy,
    MinimalStrategy,
    SingleExampleStrategy,
    MultiExampleStrategy,
    StepwiseReasoningStrategy,
)
from .classifier import ComplexityClassifier


class PromptEngine:
    """Factory and router for prompt strategies.

    The PromptEngine is responsible for:
    1. Selecting the strategy (explicit override, else the classifier)
    2. Building prompts using the selected strategy
    """

    # Strategy registry: strategy type -> strategy class
    _strategies: Dict[PromptStrategyType, Type[PromptStrategy]] = {
        PromptStrategyType.MINIMAL: MinimalStrategy,
        PromptStrategyType.SINGLE_EXAMPLE: SingleExampleStrategy,
        PromptStrategyType.MULTI_EXAMPLE: MultiExampleStrategy,
        PromptStrategyType.STEPWISE_REASONING: StepwiseReasoningStrategy,
    }

    @classmethod
    def register_strategy(
        cls, strategy_type: PromptStrategyType, strategy_class: Type[PromptStrategy]
    ) -> None:
        """Register a custom strategy class for a strategy type.

        Args:
            strategy_type: Strategy type
            strategy_class: Strategy class to use for this type
        """
        cls._strategies[strategy_type] = strategy_class

    @classmethod
    def get_strategy(cls, strategy_type: PromptStrategyType) -> PromptStrategy:
        """Get strategy instance for a strategy type.

        Raises:
            ValueError: If no strategy is registered for the type
        """
        strategy_class = cls._strategies.get(strategy_type)
        if not strategy_class:
            raise ValueError(f"No strategy registered for: {strategy_type}")
        return strategy_class()

    @classmethod
    def select(
        cls, request: TranslationRequest, classifier: ComplexityClassifier
    ) -> PromptStrategyType:
        """Choose the strategy for a request."""
        if request.strategy is not None:
            return request.strategy
        return classifier.classify(request.text)

    @classmethod
    def build(
        cls,
        strategy_type: PromptStrategyType,
        request: TranslationRequest,
        *,
        temperature: float = 0.7,
        max_tokens: int = 500,
        use_function_calling: bool = True,
    ) -> PromptBundle:
        """Build prompt bundle for a request.

        Args:
            strategy_type: Strategy to render with
            request: Translation request
            temperature: Sampling temperature
            max_tokens: Maximum output tokens
            use_function_calling: Attach the structured-output schema

        Returns:
            PromptBundle ready for the gateway
        """
        strategy = cls.get_strategy(strategy_type)
        return strategy.build(
            request,
            temperature=temperature,
            max_tokens=max_tokens,
            use_function_calling=use_function_calling,
        )
