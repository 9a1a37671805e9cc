"""Dependency injection configuration."""

from dataclasses import dataclass
from typing import Optional

from .settings import Settings, settings as default_settings
from ..clients import TextGenerationClient, ImageGenerationClient

@dataclass
class Dependencies:
    """Container for application dependencies."""

    text_client: TextGenerationClient
    image_client: ImageGenerationClient
    settings: Settings

    @property
    def is_configured(self) -> bool:
        """Whether a Gemini API key is available."""
        return bool(self.settings.gemini_api_key)

def create_dependencies(settings: Optional[Settings] = None) -> Dependencies:
    """Create the Gemini clients from ``settings``.

    A missing API key does not fail here; each client raises
    ``ConfigurationError`` when it is first asked to make a call.
    """
    settings = settings or default_settings

    text_client = TextGenerationClient(
        api_key=settings.gemini_api_key,
        model_name=settings.text_model_name,
        callbacks=settings.get_langsmith_callbacks(),
    )
    image_client = ImageGenerationClient(
        api_key=settings.gemini_api_key,
        model_name=settings.image_model_name,
    )

    return Dependencies(
        text_client=text_client,
        image_client=image_client,
        settings=settings,
    )
