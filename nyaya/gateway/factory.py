from typing import ClassVar

from nyaya.config.settings import Settings
from nyaya.gateway.client_base import BaseModelClient
from nyaya.gateway.example_client_adapter import ExampleClientAdapter
from nyaya.gateway.gateway import ModelGateway
from nyaya.gateway.openai_client_adapter import OpenAIClientAdapter
from nyaya.logging.logger import Log


class ModelGatewayFactory:
    """Creates the model gateway for the configured provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "grok": "https://api.x.ai/v1",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    DEFAULT_MODEL_NAMES: ClassVar[dict[str, str]] = {
        "grok": "grok-beta",
        "openai": "gpt-4o-mini",
        "deepseek": "deepseek-chat",
    }

    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"ollama"})

    @classmethod
    def create(cls, settings: Settings) -> ModelGateway:
        """Create a gateway from application settings.

        A provider that needs a key but has none yields an unconfigured
        gateway rather than an error, so the service can start degraded.

        Raises:
            ValueError: for an unknown provider or missing required settings.
        """
        provider = settings.model_provider.lower()
        if provider == "example":
            return ModelGateway(
                client=ExampleClientAdapter(),
                model="example",
                system_prompt=settings.model_system_prompt,
                provider=provider,
            )
        base_url = cls._resolve_base_url(provider, settings)
        model = cls._resolve_model_name(provider, settings)
        client: BaseModelClient | None = None
        if settings.model_api_key or provider in cls.KEYLESS_PROVIDERS:
            client = OpenAIClientAdapter(
                api_key=settings.model_api_key or provider,
                timeout_seconds=settings.model_timeout_seconds,
                base_url=base_url,
            )
        else:
            Log.warning(f"No API key configured for model provider '{provider}'")
        return ModelGateway(
            client=client,
            model=model,
            system_prompt=settings.model_system_prompt,
            provider=provider,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = settings.model_base_url.strip()
        if provider == "openai":
            return override or None
        if provider == "openai_compatible":
            if not override:
                raise ValueError(
                    "model_base_url is required for model_provider=openai_compatible"
                )
            return override
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return override or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown model provider '{provider}'. Choose from: {supported}")

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        name = settings.model_name.strip() or cls.DEFAULT_MODEL_NAMES.get(provider, "")
        if not name:
            raise ValueError(f"model_name is required for model_provider={provider}")
        return name
