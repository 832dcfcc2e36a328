"""Base prompt strategy.

This module defines the abstract base class for all translation prompt
strategies. Every strategy renders through the same skeleton so the shared
parts (language instructions, quoting, output instruction) cannot drift
apart between templates.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from tranzio.core.prompts.output_schemas import get_function_schema, to_tool

from ..models.prompt import Message, PromptBundle
from ..models.request import PromptStrategyType, TranslationRequest

AUTO_DETECT_INSTRUCTION = "Please auto-detect the source language."
OUTPUT_INSTRUCTION = (
    "Provide only the translated text without any additional explanations or formatting."
)


@dataclass(frozen=True)
class WorkedExample:
    """A demonstration translation embedded in a prompt."""

    text: str
    source_language: str
    target_language: str
    translation: str

    def render(self, label: Optional[str] = None) -> str:
        lines = [
            f'Input: "{self.text}"',
            f"Source: {self.source_language}",
            f"Target: {self.target_language}",
            f'Output: "{self.translation}"',
        ]
        if label:
            lines.insert(0, f"{label}:")
        return "\n".join(lines)


class PromptStrategy(ABC):
    """Abstract base class for translation prompt strategies.

    Each strategy is responsible for:
    1. Rendering the request into a single prompt text
    2. Attaching the structured-output schema when function calling is on
    3. Carrying the generation options into the PromptBundle

    Subclasses supply the strategy-specific guidance (examples, reasoning
    steps); the surrounding instructions come from this class.
    """

    strategy_type: PromptStrategyType

    def build(
        self,
        request: TranslationRequest,
        *,
        temperature: float = 0.7,
        max_tokens: int = 500,
        use_function_calling: bool = True,
    ) -> PromptBundle:
        """Build prompt bundle for a request.

        Args:
            request: Translation request
            temperature: Sampling temperature
            max_tokens: Maximum output tokens
            use_function_calling: Attach the translate_text tool

        Returns:
            PromptBundle ready for the gateway
        """
        prompt = self.render(request)
        tools = [to_tool(get_function_schema())] if use_function_calling else None

        return PromptBundle(
            messages=[Message(role="user", content=prompt)],
            temperature=temperature,
            max_tokens=max_tokens,
            tools=tools,
            strategy=self.strategy_type.value,
            estimated_input_tokens=self.estimate_tokens(prompt),
        )

    def render(self, request: TranslationRequest) -> str:
        """Render the full prompt text."""
        sections = [self.header(request)]
        sections.extend(self.guidance(request))
        sections.append(self.task(request))
        sections.append(self.closing(request))
        return "\n\n".join(section for section in sections if section)

    def header(self, request: TranslationRequest) -> str:
        return f"You are a professional translator. {self.source_instruction(request)}"

    @abstractmethod
    def guidance(self, request: TranslationRequest) -> List[str]:
        """Strategy-specific sections placed between header and task."""
        pass

    def task(self, request: TranslationRequest) -> str:
        return (
            f"Please translate the following text to {request.target_language}:\n\n"
            f"{self.quote(request.text)}"
        )

    def closing(self, request: TranslationRequest) -> str:
        return OUTPUT_INSTRUCTION

    @staticmethod
    def source_instruction(request: TranslationRequest) -> str:
        if request.source_language:
            return f"The text is in {request.source_language}."
        return AUTO_DETECT_INSTRUCTION

    @staticmethod
    def quote(text: str) -> str:
        """Delimit the payload; the text itself is embedded verbatim."""
        return f'"{text}"'

    def estimate_tokens(self, text: str) -> int:
        """Estimate token count for text.

        Rough heuristic: about 4 characters per token for Latin scripts.
        """
        return len(text) // 4
