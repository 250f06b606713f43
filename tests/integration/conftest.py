from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

from nyaya.analysis.response_validator import ResponseValidator
from nyaya.api.app import create_app
from nyaya.config.settings import Settings
from nyaya.extraction.factory import TextExtractorFactory
from nyaya.gateway.client_base import BaseModelClient
from nyaya.gateway.gateway import ModelGateway
from nyaya.orchestrator.orchestrator import AnalysisOrchestrator
from nyaya.prompts.composer import PromptComposer

AppFactory = Callable[..., TestClient]


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(_env_file=None, model_provider="grok", model_api_key="")  # type: ignore[call-arg]


@pytest.fixture()
def make_client(test_settings: Settings) -> AppFactory:
    """Build a TestClient whose model calls go to the given client (or nowhere)."""

    def factory(model_client: BaseModelClient | None, *, max_retries: int = 0) -> TestClient:
        orchestrator = AnalysisOrchestrator(
            extractor=TextExtractorFactory.create(test_settings),
            composer=PromptComposer(),
            gateway=ModelGateway(client=model_client, model="test-model", provider="stub"),
            validator=ResponseValidator(),
            temperature=test_settings.model_temperature,
            max_retries=max_retries,
        )
        return TestClient(create_app(test_settings, orchestrator=orchestrator))

    return factory
