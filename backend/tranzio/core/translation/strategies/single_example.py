"""Single-example translation strategy."""

from typing import List

from .base import PromptStrategy, WorkedExample
from ..models.request import PromptStrategyType, TranslationRequest


class SingleExampleStrategy(PromptStrategy):
    """Instruction plus exactly one worked example.

    The example shows the expected input/output format, which helps with
    moderately long sentences.
    """

    strategy_type = PromptStrategyType.SINGLE_EXAMPLE

    EXAMPLE = WorkedExample(
        text="Good morning, how are you today?",
        source_language="English",
        target_language="Spanish",
        translation="Buenos días, ¿cómo estás hoy?",
    )

    def guidance(self, request: TranslationRequest) -> List[str]:
        return [
            "Here's an example of how to translate:",
            self.EXAMPLE.render(),
        ]

    def task(self, request: TranslationRequest) -> str:
        return (
            f"Now please translate the following text to {request.target_language}:\n\n"
            f"{self.quote(request.text)}"
        )
