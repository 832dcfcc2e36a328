"""Multi-example translation strategy.

Demonstrates idiomatic translation across several language pairs. Used for
long or idiomatic text where a literal rendering would read badly.
"""

from typing import List

from .base import PromptStrategy, WorkedExample
from ..models.request import PromptStrategyType, TranslationRequest


class MultiExampleStrategy(PromptStrategy):
    """Instruction plus several worked examples over distinct language pairs."""

    strategy_type = PromptStrategyType.MULTI_EXAMPLE

    EXAMPLES = (
        WorkedExample(
            text="It's raining cats and dogs",
            source_language="English",
            target_language="Spanish",
            translation="Está lloviendo a cántaros",
        ),
        WorkedExample(
            text="The early bird catches the worm",
            source_language="English",
            target_language="French",
            translation="L'oiseau matinal attrape le ver",
        ),
        WorkedExample(
            text="Actions speak louder than words",
            source_language="English",
            target_language="German",
            translation="Taten sagen mehr als Worte",
        ),
        WorkedExample(
            text="Don't judge a book by its cover",
            source_language="English",
            target_language="Italian",
            translation="Non giudicare un libro dalla copertina",
        ),
    )

    def header(self, request: TranslationRequest) -> str:
        return (
            f"You are a professional translator with expertise in "
            f"{request.target_language}. {self.source_instruction(request)}"
        )

    def guidance(self, request: TranslationRequest) -> List[str]:
        sections = ["Here are several examples of high-quality translations:"]
        sections.extend(
            example.render(f"Example {i}")
            for i, example in enumerate(self.EXAMPLES, start=1)
        )
        return sections

    def task(self, request: TranslationRequest) -> str:
        return (
            f"Now please translate the following text to {request.target_language}, "
            f"maintaining the same level of quality and cultural sensitivity:\n\n"
            f"{self.quote(request.text)}"
        )
