"""Tests for prompt strategies and the prompt engine."""

import pytest

from tranzio.core.prompts import TRANSLATE_FUNCTION_NAME
from tranzio.core.translation.models import PromptStrategyType, TranslationRequest
from tranzio.core.translation.pipeline import (
    HeuristicComplexityClassifier,
    PromptEngine,
)
from tranzio.core.translation.strategies import (
    MinimalStrategy,
    MultiExampleStrategy,
    StepwiseReasoningStrategy,
)

ALL_STRATEGIES = list(PromptStrategyType)


def make_request(text="The cat sleeps", target="German", source=None, strategy=None):
    return TranslationRequest(
        text=text, target_language=target, source_language=source, strategy=strategy
    )


class TestCommonTemplate:
    """Properties every strategy shares."""

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES)
    def test_states_target_and_quotes_text(self, strategy):
        bundle = PromptEngine.build(strategy, make_request())

        assert "German" in bundle.prompt_text
        assert '"The cat sleeps"' in bundle.prompt_text
        assert bundle.strategy == strategy.value

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES)
    def test_auto_detect_without_source(self, strategy):
        bundle = PromptEngine.build(strategy, make_request())
        assert "auto-detect" in bundle.prompt_text

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES)
    def test_states_source_when_given(self, strategy):
        bundle = PromptEngine.build(strategy, make_request(source="English"))

        assert "The text is in English." in bundle.prompt_text
        assert "auto-detect" not in bundle.prompt_text

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES)
    def test_asks_for_translation_only(self, strategy):
        bundle = PromptEngine.build(strategy, make_request())
        assert "only" in bundle.prompt_text.splitlines()[-1]

    def test_text_embedded_verbatim(self):
        text = 'She said "hi" {and left}'
        bundle = PromptEngine.build(PromptStrategyType.MINIMAL, make_request(text=text))
        assert f'"{text}"' in bundle.prompt_text


class TestStrategyShapes:

    def test_minimal_has_no_examples(self):
        prompt = PromptEngine.build(PromptStrategyType.MINIMAL, make_request()).prompt_text
        assert "Input:" not in prompt
        assert "Example" not in prompt

    def test_single_example_has_one_example(self):
        prompt = PromptEngine.build(
            PromptStrategyType.SINGLE_EXAMPLE, make_request()
        ).prompt_text
        assert prompt.count("Input:") == 1
        assert "Buenos días" in prompt

    def test_multi_example_has_four_language_pairs(self):
        prompt = PromptEngine.build(
            PromptStrategyType.MULTI_EXAMPLE, make_request()
        ).prompt_text

        assert prompt.count("Input:") == 4
        targets = {ex.target_language for ex in MultiExampleStrategy.EXAMPLES}
        assert len(targets) == 4

    def test_stepwise_lists_five_steps_in_order(self):
        prompt = PromptEngine.build(
            PromptStrategyType.STEPWISE_REASONING, make_request()
        ).prompt_text

        positions = [prompt.index(f"{i}. ") for i in range(1, 6)]
        assert positions == sorted(positions)
        assert prompt.index("5. ") < prompt.index("Text to translate:")


class TestBundleOptions:

    def test_function_calling_attaches_tool(self):
        bundle = PromptEngine.build(PromptStrategyType.MINIMAL, make_request())

        assert bundle.uses_function_calling
        assert bundle.tools[0]["type"] == "function"
        assert bundle.tools[0]["function"]["name"] == TRANSLATE_FUNCTION_NAME

    def test_function_calling_disabled(self):
        bundle = PromptEngine.build(
            PromptStrategyType.MINIMAL, make_request(), use_function_calling=False
        )
        assert bundle.tools is None

    def test_generation_options(self):
        bundle = PromptEngine.build(
            PromptStrategyType.MINIMAL, make_request(), temperature=0.2, max_tokens=64
        )

        assert bundle.temperature == 0.2
        assert bundle.max_tokens == 64
        assert bundle.estimated_input_tokens == len(bundle.prompt_text) // 4
        assert bundle.to_openai_format() == [{"role": "user", "content": bundle.prompt_text}]

    def test_preview_dict(self):
        preview = PromptEngine.build(PromptStrategyType.MINIMAL, make_request()).to_preview_dict()

        assert preview["strategy"] == "minimal"
        assert preview["function_calling"] is True
        assert set(preview) == {
            "prompt", "strategy", "temperature", "max_tokens",
            "function_calling", "estimated_tokens",
        }


class TestSelection:

    def test_override_wins(self):
        request = make_request(text="hi", strategy=PromptStrategyType.STEPWISE_REASONING)
        chosen = PromptEngine.select(request, HeuristicComplexityClassifier())
        assert chosen == PromptStrategyType.STEPWISE_REASONING

    def test_classifier_used_without_override(self):
        chosen = PromptEngine.select(make_request(text="hi"), HeuristicComplexityClassifier())
        assert chosen == PromptStrategyType.MINIMAL

    def test_register_strategy_replaces_class(self):
        class LoudMinimal(MinimalStrategy):
            def closing(self, request):
                return "Reply with ONLY the translation."

        original = PromptEngine._strategies[PromptStrategyType.MINIMAL]
        PromptEngine.register_strategy(PromptStrategyType.MINIMAL, LoudMinimal)
        try:
            bundle = PromptEngine.build(PromptStrategyType.MINIMAL, make_request())
            assert bundle.prompt_text.endswith("Reply with ONLY the translation.")
        finally:
            PromptEngine.register_strategy(PromptStrategyType.MINIMAL, original)

    def test_stepwise_strategy_class(self):
        strategy = PromptEngine.get_strategy(PromptStrategyType.STEPWISE_REASONING)
        assert isinstance(strategy, StepwiseReasoningStrategy)
