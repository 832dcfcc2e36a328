"""Token usage tracking.

Every model response passes through UsageTracker.record, which logs a
usage report with an estimated cost and adds it to a running summary.
"""

import logging
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from tranzio.core.translation.models.response import TokenUsage

# Approximate pricing used for usage reports (USD per million tokens)
DEFAULT_INPUT_COST_PER_MILLION = 0.5
DEFAULT_OUTPUT_COST_PER_MILLION = 1.5

logger = logging.getLogger(__name__)


class UsageSummary(BaseModel):
    """Aggregated usage since the tracker was created or reset."""

    total_requests: int = Field(default=0, description="Responses with usage data")
    total_prompt_tokens: int = 0
    total_completion_tokens: int = 0
    total_tokens: int = 0
    estimated_total_cost: float = Field(default=0.0, description="USD")
    average_tokens_per_request: float = 0.0


def format_token_count(count: int) -> str:
    """Format a token count for display (``1.5K``, ``2.0M``)."""
    if count >= 1_000_000:
        return f"{count / 1_000_000:.1f}M"
    if count >= 1_000:
        return f"{count / 1_000:.1f}K"
    return str(count)


def calculate_cost(
    prompt_tokens: int,
    completion_tokens: int,
    input_cost_per_million: float = DEFAULT_INPUT_COST_PER_MILLION,
    output_cost_per_million: float = DEFAULT_OUTPUT_COST_PER_MILLION,
) -> float:
    """Estimate cost in USD for a token count."""
    input_cost = (prompt_tokens / 1_000_000) * input_cost_per_million
    output_cost = (completion_tokens / 1_000_000) * output_cost_per_million
    return input_cost + output_cost


class UsageTracker:
    """Logs per-call token usage and keeps running totals."""

    def __init__(
        self,
        input_cost_per_million: float = DEFAULT_INPUT_COST_PER_MILLION,
        output_cost_per_million: float = DEFAULT_OUTPUT_COST_PER_MILLION,
    ):
        self.input_cost_per_million = input_cost_per_million
        self.output_cost_per_million = output_cost_per_million
        self.reset()

    def reset(self) -> None:
        self._requests = 0
        self._prompt_tokens = 0
        self._completion_tokens = 0
        self._total_tokens = 0
        self._cost = 0.0

    def record(self, usage: Optional["TokenUsage"]) -> Optional[float]:
        """Log and accumulate usage for one response.

        Args:
            usage: Usage reported by the provider, if any

        Returns:
            Estimated cost of the call in USD, or None without usage data
        """
        if usage is None:
            logger.warning("No token usage data available")
            return None

        cost = usage.estimate_cost_usd(
            self.input_cost_per_million, self.output_cost_per_million
        )

        self._requests += 1
        self._prompt_tokens += usage.prompt_tokens
        self._completion_tokens += usage.completion_tokens
        self._total_tokens += usage.total_tokens
        self._cost += cost

        total = usage.total_tokens
        prompt_share = (usage.prompt_tokens / total * 100) if total else 0.0
        response_share = (usage.completion_tokens / total * 100) if total else 0.0

        logger.info(
            "Token usage: prompt=%s completion=%s total=%s cost=$%.6f "
            "(prompt %.1f%%, response %.1f%%)",
            format_token_count(usage.prompt_tokens),
            format_token_count(usage.completion_tokens),
            format_token_count(total),
            cost,
            prompt_share,
            response_share,
        )
        return cost

    def summary(self) -> UsageSummary:
        average = self._total_tokens / self._requests if self._requests else 0.0
        return UsageSummary(
            total_requests=self._requests,
            total_prompt_tokens=self._prompt_tokens,
            total_completion_tokens=self._completion_tokens,
            total_tokens=self._total_tokens,
            estimated_total_cost=round(self._cost, 6),
            average_tokens_per_request=round(average, 2),
        )
