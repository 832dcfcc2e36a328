"""API dependencies.

Provides the process-wide glossary store, usage tracker and translation
pipeline. Tests replace them through ``app.dependency_overrides``.
"""

from functools import lru_cache

from tranzio.config import settings
from tranzio.core.glossary import GlossaryStore
from tranzio.core.llm import UsageTracker
from tranzio.core.translation.pipeline import PipelineConfig, TranslationPipeline


@lru_cache
def get_glossary_store() -> GlossaryStore:
    """Get the glossary store backed by the configured file."""
    return GlossaryStore(settings.glossary_path)


@lru_cache
def get_usage_tracker() -> UsageTracker:
    return UsageTracker()


@lru_cache
def get_pipeline() -> TranslationPipeline:
    """Get the translation pipeline built from application settings."""
    return TranslationPipeline(
        PipelineConfig.from_settings(settings),
        glossary=get_glossary_store(),
        usage_tracker=get_usage_tracker(),
    )
