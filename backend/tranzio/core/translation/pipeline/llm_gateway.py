"""Model gateway.

``LLMGateway`` is the boundary between the pipeline and any model provider.
``LiteLLMGateway`` reaches every provider through LiteLLM and owns the
transport concerns: provider-prefixed model names, request timeouts and
retrying transient provider errors. Callers see one request and one
response, or an exception once the retry budget is spent.
"""

import json
import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from litellm import acompletion
from litellm.exceptions import (
    APIConnectionError,
    InternalServerError,
    RateLimitError,
    ServiceUnavailableError,
    Timeout,
)
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..models.prompt import PromptBundle
from ..models.response import LLMResponse, StructuredCall, TokenUsage

logger = logging.getLogger(__name__)

TRANSIENT_ERRORS = (
    APIConnectionError,
    InternalServerError,
    RateLimitError,
    ServiceUnavailableError,
    Timeout,
)

# Providers LiteLLM expects as a "<provider>/<model>" prefix
PREFIXED_PROVIDERS = ("openai", "gemini", "anthropic", "deepseek", "ollama", "openrouter")


class LLMGateway(ABC):
    """Abstract gateway for LLM providers."""

    @property
    @abstractmethod
    def provider(self) -> str:
        pass

    @property
    @abstractmethod
    def model(self) -> str:
        pass

    @abstractmethod
    async def call(self, bundle: PromptBundle) -> LLMResponse:
        """Send one prompt bundle to the model.

        Args:
            bundle: Messages, generation options and optional tools

        Returns:
            LLMResponse with text, optional function call and usage
        """
        pass

    async def health_check(self) -> bool:
        return True


class LiteLLMGateway(LLMGateway):
    """Gateway for every LiteLLM-supported provider."""

    # Backoff between attempts on transient provider errors
    RETRY_WAIT = wait_exponential(multiplier=1, min=1, max=10)

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        base_url: Optional[str] = None,
        provider_name: str = "gemini",
        timeout: Optional[float] = None,
        max_attempts: int = 3,
    ):
        """
        Args:
            api_key: Provider key; None lets LiteLLM read its environment variables
            model: Model identifier, with or without provider prefix
            base_url: Custom endpoint for OpenAI-compatible servers
            provider_name: Provider used for prefixing and logging
            timeout: Request timeout in seconds
            max_attempts: Attempts for transient provider errors
        """
        self._api_key = api_key
        self._model = model
        self._base_url = base_url
        self._provider = provider_name
        self._timeout = timeout
        self._max_attempts = max(1, max_attempts)
        self._litellm_model = self._to_litellm_model(provider_name, model)

        logger.info(
            f"[LLM Gateway] Ready: provider={provider_name}, model={self._litellm_model}, "
            f"base_url={base_url}, max_attempts={self._max_attempts}"
        )

    @staticmethod
    def _to_litellm_model(provider_name: str, model: str) -> str:
        if "/" in model:
            return model
        if provider_name == "anthropic" and model.startswith("claude"):
            return model
        if provider_name in PREFIXED_PROVIDERS:
            return f"{provider_name}/{model}"
        return model

    @property
    def provider(self) -> str:
        return self._provider

    @property
    def model(self) -> str:
        return self._model

    def _request_kwargs(self, **overrides: Any) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"model": self._litellm_model}
        if self._api_key:
            kwargs["api_key"] = self._api_key
        if self._base_url:
            kwargs["api_base"] = self._base_url
        kwargs.update(overrides)
        return kwargs

    async def call(self, bundle: PromptBundle) -> LLMResponse:
        """Call the model through LiteLLM.

        Raises:
            Exception: The provider error, once retries are exhausted or for
                non-transient failures
        """
        kwargs = self._request_kwargs(
            messages=bundle.to_openai_format(),
            temperature=bundle.temperature,
            max_tokens=bundle.max_tokens,
        )
        if self._timeout:
            kwargs["timeout"] = self._timeout
        if bundle.tools:
            kwargs["tools"] = bundle.tools

        logger.info(
            f"[LLM Gateway] Calling {self._litellm_model}: strategy={bundle.strategy}, "
            f"tools={bundle.uses_function_calling}, ~{bundle.estimated_input_tokens} tokens"
        )

        started = time.monotonic()
        completion = await self._complete(kwargs)
        elapsed_ms = int((time.monotonic() - started) * 1000)

        message = completion.choices[0].message
        return LLMResponse(
            content=message.content or "",
            structured_call=self._extract_call(message),
            provider=self._provider,
            model=self._model,
            usage=self._extract_usage(completion),
            latency_ms=elapsed_ms,
        )

    async def _complete(self, kwargs: Dict[str, Any]) -> Any:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=self.RETRY_WAIT,
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            reraise=True,
        ):
            with attempt:
                if attempt.retry_state.attempt_number > 1:
                    logger.warning(
                        f"[LLM Gateway] Retrying {self._litellm_model} "
                        f"(attempt {attempt.retry_state.attempt_number}/{self._max_attempts})"
                    )
                return await acompletion(**kwargs)

    @staticmethod
    def _extract_call(message: Any) -> Optional[StructuredCall]:
        """Decode the first tool call (or legacy function call) on a message."""
        tool_calls = getattr(message, "tool_calls", None)
        function = tool_calls[0].function if tool_calls else getattr(message, "function_call", None)
        if function is None:
            return None

        arguments = getattr(function, "arguments", None)
        if isinstance(arguments, str):
            try:
                arguments = json.loads(arguments) if arguments.strip() else {}
            except json.JSONDecodeError as e:
                logger.warning(f"[LLM Gateway] Undecodable function arguments: {e}")
                return None
        if not isinstance(arguments, dict):
            return None

        return StructuredCall(name=getattr(function, "name", None) or "", args=arguments)

    @staticmethod
    def _extract_usage(completion: Any) -> Optional[TokenUsage]:
        usage = getattr(completion, "usage", None)
        if usage is None:
            return None
        return TokenUsage(
            prompt_tokens=getattr(usage, "prompt_tokens", 0) or 0,
            completion_tokens=getattr(usage, "completion_tokens", 0) or 0,
            total_tokens=getattr(usage, "total_tokens", 0) or 0,
        )

    async def health_check(self) -> bool:
        """Send a tiny prompt; any failure means unhealthy."""
        kwargs = self._request_kwargs(
            messages=[{"role": "user", "content": "Hi"}],
            max_tokens=5,
        )
        try:
            await acompletion(**kwargs)
            return True
        except Exception as e:
            logger.warning(f"[LLM Gateway] Health check failed for {self._model}: {e}")
            return False


class GatewayFactory:
    """Builds gateways from a provider name."""

    # Default endpoint per provider; None means LiteLLM's own default
    DEFAULT_BASE_URLS: Dict[str, Optional[str]] = {
        "gemini": None,
        "openai": None,
        "anthropic": None,
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": None,
        "openrouter": None,
    }

    @classmethod
    def create(
        cls,
        provider: str,
        api_key: Optional[str],
        model: str,
        **kwargs,
    ) -> LLMGateway:
        """Create a gateway. Unknown providers are passed to LiteLLM unchanged.

        Args:
            provider: Provider name, case-insensitive
            api_key: Provider key
            model: Model identifier
            **kwargs: base_url, timeout, max_attempts

        Returns:
            A LiteLLMGateway
        """
        provider = provider.lower()
        base_url = kwargs.pop("base_url", None) or cls.DEFAULT_BASE_URLS.get(provider)
        return LiteLLMGateway(
            api_key=api_key,
            model=model,
            base_url=base_url,
            provider_name=provider,
            **kwargs,
        )

    @classmethod
    def get_supported_providers(cls) -> list[str]:
        return list(cls.DEFAULT_BASE_URLS)
