"""Main translation pipeline orchestrator.

This module provides the TranslationPipeline class that coordinates
all pipeline components for end-to-end translation.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from tranzio.core.glossary.store import GlossaryStore
from tranzio.core.llm.usage import UsageTracker

from ..models.prompt import PromptBundle
from ..models.request import PromptStrategyType, TranslationRequest
from ..models.result import ResultOrigin, TranslationResult
from .classifier import ComplexityClassifier, HeuristicComplexityClassifier
from .llm_gateway import GatewayFactory, LLMGateway
from .output_processor import OutputNormalizer
from .prompt_engine import PromptEngine
from .response_interpreter import ResponseInterpreter
from .retrieval import RetrievalResolver

logger = logging.getLogger(__name__)

RECORDABLE_ORIGINS = (ResultOrigin.MODEL_STRUCTURED, ResultOrigin.MODEL_SCRAPED)


@dataclass
class PipelineConfig:
    """Configuration for translation pipeline."""

    provider: str
    model: str
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    temperature: float = 0.7
    max_tokens: int = 500
    use_function_calling: bool = True
    record_translations: bool = False
    timeout_seconds: Optional[float] = None
    max_attempts: int = 3

    @classmethod
    def from_settings(cls, settings: Any) -> "PipelineConfig":
        """Build a config from application settings."""
        return cls(
            provider=settings.llm_provider,
            model=settings.llm_model,
            api_key=settings.get_api_key(settings.llm_provider),
            base_url=settings.llm_base_url,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_output_tokens,
            use_function_calling=settings.use_function_calling,
            record_translations=settings.record_translations,
            timeout_seconds=settings.llm_timeout_seconds,
            max_attempts=settings.llm_max_attempts,
        )


class TranslationPipeline:
    """Main orchestrator for the translation pipeline.

    Coordinates the flow:
    Request -> Retrieval -> (miss) Classifier -> PromptEngine -> PromptBundle
    -> LLMGateway -> ResponseInterpreter -> OutputNormalizer -> Result

    The glossary is always consulted before the model, and the model is
    called at most once per request.
    """

    def __init__(
        self,
        config: PipelineConfig,
        glossary: GlossaryStore,
        gateway: Optional[LLMGateway] = None,
        classifier: Optional[ComplexityClassifier] = None,
        usage_tracker: Optional[UsageTracker] = None,
    ):
        """Initialize translation pipeline.

        Args:
            config: Pipeline configuration
            glossary: Glossary store shared by retrieval and recording
            gateway: Model gateway; built from config when omitted
            classifier: Strategy classifier; heuristic when omitted
            usage_tracker: Token usage tracker; a private one when omitted
        """
        self.config = config
        self.glossary = glossary
        self.gateway = gateway or GatewayFactory.create(
            provider=config.provider,
            api_key=config.api_key,
            model=config.model,
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            max_attempts=config.max_attempts,
        )
        self.classifier = classifier or HeuristicComplexityClassifier()
        self.usage_tracker = usage_tracker or UsageTracker()
        self.normalizer = OutputNormalizer()
        self.retrieval = RetrievalResolver(glossary, self.normalizer)
        self.interpreter = ResponseInterpreter(self.normalizer)

    async def translate(
        self,
        text: str,
        target_language: str,
        source_language: Optional[str] = None,
        strategy: Optional[PromptStrategyType] = None,
    ) -> TranslationResult:
        """Translate text.

        Raises:
            pydantic.ValidationError: If the text or target language is empty
        """
        request = TranslationRequest(
            text=text,
            target_language=target_language,
            source_language=source_language,
            strategy=strategy,
        )
        return await self.resolve(request)

    async def resolve(self, request: TranslationRequest) -> TranslationResult:
        """Execute the full translation pipeline for a validated request.

        Flow:
        1. Answer from the glossary if possible
        2. Select a strategy and build the prompt
        3. Call the model once
        4. Interpret and normalize the response

        Args:
            request: Translation request

        Returns:
            Normalized TranslationResult; upstream failures are reported
            as error results rather than raised
        """
        hit = await self.retrieval.resolve(
            request.text, request.target_language, request.source_language
        )
        if hit is not None:
            return hit

        strategy_type = PromptEngine.select(request, self.classifier)
        bundle = self._build_bundle(strategy_type, request)

        try:
            response = await self.gateway.call(bundle)
        except Exception as e:
            logger.error(
                "Model call failed (provider=%s, strategy=%s): %s",
                self.gateway.provider,
                strategy_type.value,
                e,
            )
            failed = self.normalizer.error_result(
                str(e), request.target_language, request.source_language
            )
            return failed.model_copy(update={"strategy": strategy_type.value})

        self.usage_tracker.record(response.usage)

        try:
            result = self.interpreter.interpret(
                response, request.target_language, request.source_language
            )
        except Exception as e:
            logger.error(
                "Could not interpret model response (strategy=%s): %s",
                strategy_type.value,
                e,
            )
            result = self.normalizer.error_result(
                f"Could not interpret model response: {e}",
                request.target_language,
                request.source_language,
            )
        result = result.model_copy(
            update={
                "strategy": strategy_type.value,
                "tokens_used": response.usage.total_tokens if response.usage else 0,
            }
        )

        if self.config.record_translations:
            await self._record(request, result)

        return result

    async def preview(
        self,
        text: str,
        target_language: str,
        source_language: Optional[str] = None,
        strategy: Optional[PromptStrategyType] = None,
    ) -> Dict[str, Any]:
        """Preview the prompt a request would use, without calling the model.

        Returns:
            Preview dictionary with strategy, complexity profile, rendered
            prompt and whether the glossary would answer instead
        """
        request = TranslationRequest(
            text=text,
            target_language=target_language,
            source_language=source_language,
            strategy=strategy,
        )
        hit = await self.retrieval.resolve(
            request.text, request.target_language, request.source_language
        )
        strategy_type = PromptEngine.select(request, self.classifier)
        bundle = self._build_bundle(strategy_type, request)

        preview: Dict[str, Any] = {
            "strategy": strategy_type.value,
            "glossary_hit": hit is not None,
            "bundle": bundle.to_preview_dict(),
        }
        if isinstance(self.classifier, HeuristicComplexityClassifier):
            preview["profile"] = self.classifier.analyze(request.text).to_dict()
        return preview

    async def health_check(self) -> bool:
        """Check if LLM provider is available.

        Returns:
            True if provider is reachable
        """
        return await self.gateway.health_check()

    def _build_bundle(
        self, strategy_type: PromptStrategyType, request: TranslationRequest
    ) -> PromptBundle:
        return PromptEngine.build(
            strategy_type,
            request,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
            use_function_calling=self.config.use_function_calling,
        )

    async def _record(
        self, request: TranslationRequest, result: TranslationResult
    ) -> None:
        if not result.is_success or result.origin not in RECORDABLE_ORIGINS:
            return
        saved = await self.glossary.add_entry(
            request.text,
            result.translated_text,
            request.target_language,
            source_language=request.source_language,
        )
        if not saved:
            logger.warning("Could not record translation for %r", request.text)
