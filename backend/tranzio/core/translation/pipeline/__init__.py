"""Translation pipeline components.

This module provides the core pipeline components for translation:
- RetrievalResolver: Answers requests from the glossary
- HeuristicComplexityClassifier: Picks a prompt strategy
- PromptEngine: Builds prompts using strategy pattern
- LLMGateway: Unified interface for LLM providers
- ResponseInterpreter: Turns raw model responses into results
- OutputNormalizer: Canonicalizes every result
- TranslationPipeline: Orchestrates the complete flow
"""

from .classifier import (
    ComplexityClassifier,
    ComplexityProfile,
    HeuristicComplexityClassifier,
)
from .llm_gateway import GatewayFactory, LiteLLMGateway, LLMGateway
from .output_processor import OutputNormalizer
from .pipeline import PipelineConfig, TranslationPipeline
from .prompt_engine import PromptEngine
from .response_interpreter import ResponseInterpreter, find_json_span
from .retrieval import RetrievalResolver

__all__ = [
    "ComplexityClassifier",
    "ComplexityProfile",
    "HeuristicComplexityClassifier",
    "GatewayFactory",
    "LiteLLMGateway",
    "LLMGateway",
    "OutputNormalizer",
    "PipelineConfig",
    "TranslationPipeline",
    "PromptEngine",
    "ResponseInterpreter",
    "find_json_span",
    "RetrievalResolver",
]
