"""Translation prompt strategies.

This module provides strategy classes for the supported prompt styles.
Each strategy encapsulates the prompt building logic for one style.
"""

from .base import PromptStrategy, WorkedExample
from .minimal import MinimalStrategy
from .single_example import SingleExampleStrategy
from .multi_example import MultiExampleStrategy
from .stepwise import StepwiseReasoningStrategy

__all__ = [
    "PromptStrategy",
    "WorkedExample",
    "MinimalStrategy",
    "SingleExampleStrategy",
    "MultiExampleStrategy",
    "StepwiseReasoningStrategy",
]
