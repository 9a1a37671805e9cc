"""Client for the hosted Imagen endpoint."""

import base64
from typing import Any, Optional

from google import genai
from google.genai import types

from ..constants import IMAGE_MODEL_NAME
from ..errors import ConfigurationError, EndpointError
from ..utils.logging import get_logger

logger = get_logger(__name__)

IMAGE_MIME_TYPE = "image/jpeg"


class ImageGenerationClient:
    """Generates a single JPEG image and returns it as a data URI."""

    def __init__(self, api_key: Optional[str], model_name: str = IMAGE_MODEL_NAME, client: Any = None):
        self.api_key = api_key
        self.model_name = model_name
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate_image(self, prompt: str) -> str:
        """
        Generate one image for ``prompt``.

        Returns:
            str: ``data:image/jpeg;base64,...`` URI

        Raises:
            ConfigurationError: If no API key is configured
            EndpointError: If the request fails or no image bytes come back
        """
        if not self.api_key:
            raise ConfigurationError(
                "Gemini AI SDK not initialized: GEMINI_API_KEY environment variable not found."
            )

        logger.info("Sending image generation request", model=self.model_name)
        try:
            response = await self.client.aio.models.generate_images(
                model=self.model_name,
                prompt=prompt,
                config=types.GenerateImagesConfig(
                    number_of_images=1,
                    output_mime_type=IMAGE_MIME_TYPE,
                ),
            )
        except Exception as e:
            logger.error("Image generation request failed", model=self.model_name, error=str(e))
            raise EndpointError(
                f"Image generation request to {self.model_name} failed: {e}",
                endpoint="image",
                model=self.model_name,
            ) from e

        generated = getattr(response, "generated_images", None) or []
        image = getattr(generated[0], "image", None) if generated else None
        image_bytes = getattr(image, "image_bytes", None) if image is not None else None
        if not image_bytes:
            raise EndpointError(
                "No image generated or image data missing.",
                endpoint="image",
                model=self.model_name,
            )

        if isinstance(image_bytes, str):
            encoded = image_bytes
        else:
            encoded = base64.b64encode(image_bytes).decode("ascii")
        return f"data:{IMAGE_MIME_TYPE};base64,{encoded}"
