"""Translation package.

This package provides the translation pipeline and orchestration components.

Architecture:
- models/: Data models (TranslationRequest, PromptBundle, TranslationResult, etc.)
- strategies/: Prompt strategies, one per complexity level
- pipeline/: Pipeline components (RetrievalResolver, PromptEngine, etc.)
- languages.py: Languages offered to clients
"""

from .languages import SUPPORTED_LANGUAGES, get_supported_languages

# Re-export models for convenience
from .models import (
    PromptStrategyType,
    TranslationRequest,
    Message,
    PromptBundle,
    TokenUsage,
    StructuredCall,
    LLMResponse,
    ResultOrigin,
    TranslationResult,
    TranslationStatus,
)

# Re-export pipeline components
from .pipeline import (
    GatewayFactory,
    LLMGateway,
    OutputNormalizer,
    PipelineConfig,
    PromptEngine,
    ResponseInterpreter,
    RetrievalResolver,
    TranslationPipeline,
)

__all__ = [
    "SUPPORTED_LANGUAGES",
    "get_supported_languages",
    # Models
    "PromptStrategyType",
    "TranslationRequest",
    "Message",
    "PromptBundle",
    "TokenUsage",
    "StructuredCall",
    "LLMResponse",
    "ResultOrigin",
    "TranslationResult",
    "TranslationStatus",
    # Pipeline
    "GatewayFactory",
    "LLMGateway",
    "OutputNormalizer",
    "PipelineConfig",
    "PromptEngine",
    "ResponseInterpreter",
    "RetrievalResolver",
    "TranslationPipeline",
]
