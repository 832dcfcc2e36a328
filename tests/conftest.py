"""
Shared pytest fixtures for the translator test suite.

- A glossary store on a temporary path (starts from the default glossary)
- A fake model gateway that returns canned responses and records calls
- A pipeline wired to both
- A FastAPI TestClient with the app dependencies overridden
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from tranzio.core.glossary import GlossaryStore
from tranzio.core.llm import UsageTracker
from tranzio.core.translation.pipeline import PipelineConfig, TranslationPipeline

from tests.fakes import FakeGateway


@pytest.fixture
def glossary_path(tmp_path: Path) -> Path:
    """Path for a glossary file that does not exist yet."""
    return tmp_path / "data" / "glossary.json"


@pytest.fixture
def glossary_store(glossary_path: Path) -> GlossaryStore:
    return GlossaryStore(glossary_path)


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def usage_tracker() -> UsageTracker:
    return UsageTracker()


@pytest.fixture
def pipeline_config() -> PipelineConfig:
    return PipelineConfig(provider="fake", model="fake-model")


@pytest.fixture
def pipeline(
    pipeline_config: PipelineConfig,
    glossary_store: GlossaryStore,
    fake_gateway: FakeGateway,
    usage_tracker: UsageTracker,
) -> TranslationPipeline:
    return TranslationPipeline(
        pipeline_config,
        glossary=glossary_store,
        gateway=fake_gateway,
        usage_tracker=usage_tracker,
    )


@pytest.fixture
def client(pipeline, glossary_store, usage_tracker):
    """TestClient with the pipeline, store and tracker replaced by fixtures."""
    from tranzio.api.dependencies import (
        get_glossary_store,
        get_pipeline,
        get_usage_tracker,
    )
    from tranzio.main import app

    app.dependency_overrides[get_pipeline] = lambda: pipeline
    app.dependency_overrides[get_glossary_store] = lambda: glossary_store
    app.dependency_overrides[get_usage_tracker] = lambda: usage_tracker
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
