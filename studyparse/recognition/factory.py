from typing import ClassVar

from studyparse.config.settings import Settings
from studyparse.recognition.base import BaseTextRecognizer
from studyparse.recognition.openai_adapter import OpenAITextRecognizer


class TextRecognizerFactory:
    """Creates the configured text recognizer, or None when disabled."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "lovable": "https://ai.gateway.lovable.dev/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTextRecognizer | None:
        provider = settings.recognition_provider.strip().lower()
        if provider in ("", "none"):
            return None
        return OpenAITextRecognizer(
            api_key=settings.recognition_api_key,
            model=settings.recognition_model_name,
            timeout_seconds=settings.recognition_timeout_seconds,
            max_retries=settings.recognition_max_retries,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.recognition_base_url.strip()
            if not url:
                raise ValueError(
                    "recognition_base_url is required for "
                    "recognition_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "none",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown recognition provider '{provider}'. Choose from: {supported}"
        )
