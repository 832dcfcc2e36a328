"""End-to-end tests for the translation pipeline."""

import pytest
from pydantic import ValidationError

from tranzio.core.translation.models import (
    PromptStrategyType,
    ResultOrigin,
    TokenUsage,
    TranslationStatus,
)
from tranzio.core.translation.pipeline import PipelineConfig, TranslationPipeline

from tests.fakes import FakeGateway, call_response, text_response


class TestGlossaryFirst:
    """Requests the glossary can answer never reach the model."""

    @pytest.mark.asyncio
    async def test_exact_hit(self, pipeline, fake_gateway):
        result = await pipeline.translate("hello", "Spanish")

        assert result.translated_text == "hola"
        assert result.confidence == 1.0
        assert result.status == TranslationStatus.SUCCESS
        assert result.origin == ResultOrigin.GLOSSARY
        assert fake_gateway.calls == []

    @pytest.mark.asyncio
    async def test_composed_hit(self, pipeline, fake_gateway):
        result = await pipeline.translate("hello goodbye", "French")

        assert result.translated_text == "bonjour au revoir"
        assert result.confidence == 0.9
        assert result.source_language == "auto-detected"
        assert fake_gateway.calls == []

    @pytest.mark.asyncio
    async def test_glossary_hit_ignores_strategy_override(self, pipeline, fake_gateway):
        result = await pipeline.translate(
            "hello", "Spanish", strategy=PromptStrategyType.STEPWISE_REASONING
        )
        assert result.translated_text == "hola"
        assert result.strategy is None
        assert fake_gateway.calls == []


class TestModelFallback:
    """Glossary misses go to the model exactly once."""

    @pytest.mark.asyncio
    async def test_plain_text_answer(self, pipeline, fake_gateway):
        fake_gateway.queue(text_response("plugh xyzzy"))

        result = await pipeline.translate("xyzzy plugh", "Spanish")

        assert len(fake_gateway.calls) == 1
        assert fake_gateway.calls[0].strategy == "minimal"
        assert result.translated_text == "plugh xyzzy"
        assert result.status == TranslationStatus.SUCCESS
        assert result.strategy == "minimal"

    @pytest.mark.asyncio
    async def test_structured_answer(self, pipeline, fake_gateway):
        fake_gateway.queue(
            call_response(
                {
                    "text": "good night",
                    "sourceLang": "English",
                    "targetLang": "Spanish",
                    "translatedText": "buenas noches",
                    "confidence": 0.8,
                },
                usage=TokenUsage(prompt_tokens=120, completion_tokens=30),
            )
        )

        result = await pipeline.translate("good night", "Spanish")

        assert result.translated_text == "buenas noches"
        assert result.confidence == 0.8
        assert result.origin == ResultOrigin.MODEL_STRUCTURED
        assert result.tokens_used == 150

    @pytest.mark.asyncio
    async def test_strategy_override_reaches_prompt(self, pipeline, fake_gateway):
        fake_gateway.queue(text_response("ciao"))

        result = await pipeline.translate(
            "hi there", "Italian", strategy=PromptStrategyType.STEPWISE_REASONING
        )

        bundle = fake_gateway.calls[0]
        assert bundle.strategy == "stepwise_reasoning"
        assert "Text to translate:" in bundle.prompt_text
        assert result.strategy == "stepwise_reasoning"

    @pytest.mark.asyncio
    async def test_classifier_picks_multi_example_for_idiom(self, pipeline, fake_gateway):
        fake_gateway.queue(text_response("Llueve a cántaros"))

        await pipeline.translate("It's raining cats and dogs", "Spanish")

        assert fake_gateway.calls[0].strategy == "multi_example"

    @pytest.mark.asyncio
    async def test_config_flows_into_bundle(self, glossary_store):
        gateway = FakeGateway([text_response("x")])
        config = PipelineConfig(
            provider="fake",
            model="fake-model",
            temperature=0.1,
            max_tokens=42,
            use_function_calling=False,
        )
        pipeline = TranslationPipeline(config, glossary_store, gateway=gateway)

        await pipeline.translate("xyzzy", "Spanish")

        bundle = gateway.calls[0]
        assert bundle.temperature == 0.1
        assert bundle.max_tokens == 42
        assert bundle.tools is None


class TestUpstreamFailure:

    @pytest.mark.asyncio
    async def test_gateway_error_becomes_result(self, pipeline, fake_gateway):
        fake_gateway.queue(ConnectionError("connection refused"))

        result = await pipeline.translate("xyzzy plugh", "Spanish")

        assert result.status == TranslationStatus.ERROR
        assert result.error == "connection refused"
        assert result.translated_text == ""
        assert result.source_language == "unknown"
        assert result.origin == ResultOrigin.UPSTREAM_ERROR
        assert result.strategy == "minimal"

    @pytest.mark.asyncio
    async def test_gateway_error_keeps_caller_source(self, pipeline, fake_gateway):
        fake_gateway.queue(RuntimeError("boom"))

        result = await pipeline.translate("xyzzy", "Spanish", source_language="English")
        assert result.source_language == "English"

    @pytest.mark.asyncio
    async def test_no_retry_in_pipeline(self, pipeline, fake_gateway):
        fake_gateway.queue(RuntimeError("boom"))
        fake_gateway.queue(text_response("should not be used"))

        await pipeline.translate("xyzzy", "Spanish")

        assert len(fake_gateway.calls) == 1

    @pytest.mark.asyncio
    async def test_interpretation_failure_becomes_result(self, glossary_store, monkeypatch):
        gateway = FakeGateway([text_response("gato")])
        config = PipelineConfig(provider="fake", model="fake-model", record_translations=True)
        pipeline = TranslationPipeline(config, glossary_store, gateway=gateway)

        def broken_interpret(*args, **kwargs):
            raise OverflowError("int too large to convert to float")

        monkeypatch.setattr(pipeline.interpreter, "interpret", broken_interpret)
        result = await pipeline.translate("cat", "Spanish")

        assert result.status == TranslationStatus.ERROR
        assert not result.is_success
        assert "int too large" in result.error
        assert result.strategy == "minimal"
        assert await glossary_store.lookup("cat", "Spanish") is None

    @pytest.mark.asyncio
    async def test_oversized_confidence_end_to_end(self, pipeline, fake_gateway):
        args = {
            "sourceLang": "English",
            "targetLang": "Spanish",
            "translatedText": "gato",
            "confidence": 10**400,
        }
        fake_gateway.queue(call_response(args))

        result = await pipeline.translate("xyzzy", "Spanish")

        assert result.is_success
        assert result.translated_text == "gato"
        assert result.confidence == 1.0


class TestValidation:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   "])
    async def test_empty_text_rejected(self, pipeline, fake_gateway, text):
        with pytest.raises(ValidationError):
            await pipeline.translate(text, "Spanish")
        assert fake_gateway.calls == []


class TestUsageAndRecording:

    @pytest.mark.asyncio
    async def test_usage_recorded(self, pipeline, fake_gateway, usage_tracker):
        fake_gateway.queue(
            text_response("x", usage=TokenUsage(prompt_tokens=100, completion_tokens=20))
        )

        await pipeline.translate("xyzzy", "Spanish")

        summary = usage_tracker.summary()
        assert summary.total_requests == 1
        assert summary.total_tokens == 120

    @pytest.mark.asyncio
    async def test_recording_disabled_by_default(self, pipeline, fake_gateway, glossary_store):
        fake_gateway.queue(
            call_response(
                {"sourceLang": "English", "targetLang": "Spanish", "translatedText": "gato"}
            )
        )

        await pipeline.translate("cat", "Spanish")

        assert await glossary_store.lookup("cat", "Spanish") is None

    @pytest.mark.asyncio
    async def test_recorded_translation_served_from_glossary(self, glossary_store):
        gateway = FakeGateway(
            [
                call_response(
                    {"sourceLang": "English", "targetLang": "Spanish", "translatedText": "gato"}
                )
            ]
        )
        config = PipelineConfig(provider="fake", model="fake-model", record_translations=True)
        pipeline = TranslationPipeline(config, glossary_store, gateway=gateway)

        first = await pipeline.translate("Cat", "Spanish")
        second = await pipeline.translate("cat", "Spanish")

        assert first.origin == ResultOrigin.MODEL_STRUCTURED
        assert second.origin == ResultOrigin.GLOSSARY
        assert second.translated_text == "gato"
        assert len(gateway.calls) == 1

    @pytest.mark.asyncio
    async def test_plain_text_not_recorded(self, glossary_store):
        gateway = FakeGateway([text_response("gato")])
        config = PipelineConfig(provider="fake", model="fake-model", record_translations=True)
        pipeline = TranslationPipeline(config, glossary_store, gateway=gateway)

        await pipeline.translate("cat", "Spanish")

        assert await glossary_store.lookup("cat", "Spanish") is None


class TestPreview:

    @pytest.mark.asyncio
    async def test_preview_does_not_call_model(self, pipeline, fake_gateway):
        preview = await pipeline.preview("Meet me at 5 #now", "German")

        assert fake_gateway.calls == []
        assert preview["strategy"] == "single_example"
        assert preview["glossary_hit"] is False
        assert preview["profile"]["has_numbers"] is True
        assert '"Meet me at 5 #now"' in preview["bundle"]["prompt"]

    @pytest.mark.asyncio
    async def test_preview_reports_glossary_hit(self, pipeline):
        preview = await pipeline.preview("hello", "Spanish")
        assert preview["glossary_hit"] is True


class TestHealthCheck:

    @pytest.mark.asyncio
    async def test_health_check_delegates_to_gateway(self, pipeline):
        assert await pipeline.health_check() is True
