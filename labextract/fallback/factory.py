from typing import ClassVar

from labextract.config.settings import Settings
from labextract.fallback.base import BaseMarkerFallback
from labextract.fallback.example_client_adapter import ExampleClientAdapter
from labextract.fallback.llm_fallback import LlmMarkerFallback
from labextract.fallback.openai_client_adapter import OpenAIClientAdapter


class FallbackFactory:
    """Creates the configured fallback extractor, or None when disabled."""

    PROVIDERS: ClassVar[tuple[str, ...]] = ("none", "example", "openai")

    @classmethod
    def create(cls, settings: Settings) -> BaseMarkerFallback | None:
        """Create a configured fallback from application settings."""
        provider = settings.fallback_provider.strip().lower()
        if provider in ("", "none"):
            return None
        if provider == "example":
            return LlmMarkerFallback(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
                max_text_chars=settings.fallback_max_text_chars,
            )
        if provider == "openai":
            client = OpenAIClientAdapter(
                api_key=settings.fallback_openai_api_key,
                timeout_seconds=settings.fallback_openai_timeout_seconds,
            )
            return LlmMarkerFallback(
                client=client,
                model=settings.fallback_openai_model_name,
                temperature=settings.fallback_openai_temperature,
                max_text_chars=settings.fallback_max_text_chars,
            )
        raise ValueError(
            f"Unknown fallback provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
