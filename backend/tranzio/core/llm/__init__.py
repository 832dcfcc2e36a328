"""LLM integration package.

This package provides token usage tracking. For model calls, use the
translation pipeline:
- tranzio.core.translation.pipeline.TranslationPipeline
- tranzio.core.translation.pipeline.GatewayFactory
"""

from .usage import UsageSummary, UsageTracker, calculate_cost, format_token_count

__all__ = [
    "UsageSummary",
    "UsageTracker",
    "calculate_cost",
    "format_token_count",
]
