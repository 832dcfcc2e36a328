"""Model gateway response types.

Whatever provider answered, the gateway hands the pipeline an LLMResponse:
free text, an optional decoded function call and the reported token usage.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, model_validator

from tranzio.core.llm.usage import (
    DEFAULT_INPUT_COST_PER_MILLION,
    DEFAULT_OUTPUT_COST_PER_MILLION,
    calculate_cost,
)


class TokenUsage(BaseModel):
    """Tokens reported for one call."""

    prompt_tokens: int = Field(default=0, ge=0)
    completion_tokens: int = Field(default=0, ge=0)
    total_tokens: int = Field(default=0, ge=0, description="Derived when the provider omits it")

    @model_validator(mode="after")
    def fill_total(self) -> "TokenUsage":
        if not self.total_tokens:
            self.total_tokens = self.prompt_tokens + self.completion_tokens
        return self

    def estimate_cost_usd(
        self,
        input_cost_per_million: float = DEFAULT_INPUT_COST_PER_MILLION,
        output_cost_per_million: float = DEFAULT_OUTPUT_COST_PER_MILLION,
    ) -> float:
        return calculate_cost(
            self.prompt_tokens,
            self.completion_tokens,
            input_cost_per_million,
            output_cost_per_million,
        )


class StructuredCall(BaseModel):
    """A function call emitted by the model."""

    name: str = Field(..., description="Function name")
    args: Dict[str, Any] = Field(default_factory=dict, description="Decoded arguments")


class LLMResponse(BaseModel):
    """Raw response from the model boundary."""

    content: str = Field(default="", description="Free-text response content")
    structured_call: Optional[StructuredCall] = Field(
        default=None, description="Function call payload, if the model made one"
    )

    provider: str = "unknown"
    model: str = "unknown"

    # None when the provider did not report usage
    usage: Optional[TokenUsage] = None

    latency_ms: int = 0
    received_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
