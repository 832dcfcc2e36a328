"""Rendered prompts handed to the model gateway."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class Message(BaseModel):
    """One chat message."""

    role: str = Field(..., description="'system', 'user' or 'assistant'")
    content: str


class PromptBundle(BaseModel):
    """A prompt plus the generation options to send it with.

    Produced by a prompt strategy, consumed by LLMGateway.call.
    """

    messages: List[Message]

    temperature: float = Field(default=0.7, ge=0.0, le=1.0)
    max_tokens: int = Field(default=500, gt=0, description="Output token cap")

    # translate_text declaration in OpenAI tool format, when function calling is on
    tools: Optional[List[Dict[str, Any]]] = None

    strategy: str = Field(default="minimal", description="Strategy that rendered the prompt")
    estimated_input_tokens: int = 0

    @property
    def prompt_text(self) -> str:
        """The rendered user prompt."""
        return next((m.content for m in self.messages if m.role == "user"), "")

    @property
    def uses_function_calling(self) -> bool:
        return bool(self.tools)

    def to_openai_format(self) -> List[Dict[str, str]]:
        """Messages as the ``messages`` argument of a chat completion."""
        return [m.model_dump() for m in self.messages]

    def to_preview_dict(self) -> Dict[str, Any]:
        """Summary shown by the preview endpoint."""
        return {
            "prompt": self.prompt_text,
            "strategy": self.strategy,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "function_calling": self.uses_function_calling,
            "estimated_tokens": self.estimated_input_tokens,
        }
