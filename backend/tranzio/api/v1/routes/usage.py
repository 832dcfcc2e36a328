"""Token usage API routes."""

from fastapi import APIRouter, Depends

from tranzio.api.dependencies import get_usage_tracker
from tranzio.core.llm import UsageSummary, UsageTracker

router = APIRouter()


@router.get("/usage")
async def usage_summary(
    tracker: UsageTracker = Depends(get_usage_tracker),
) -> UsageSummary:
    """Get aggregated token usage since startup."""
    return tracker.summary()
