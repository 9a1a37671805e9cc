"""Mnemonic image generation."""

from typing import Sequence

from ..clients import ImageGenerationClient
from ..errors import ConfigurationError, EndpointError
from ..prompts import IMAGE_PROMPT
from ..utils.logging import get_logger

logger = get_logger(__name__)

def build_image_prompt(original_name: str, pinyin_name: str, keywords: Sequence[str]) -> str:
    """Describe a whimsical, text-free cartoon built from the keywords."""
    return IMAGE_PROMPT.format(
        original_name=original_name,
        pinyin_name=pinyin_name,
        keyword_string=", ".join(keywords),
    )

class MnemonicImageExpert:
    """Turns a name, its Pinyin and keywords into a memory-aid picture."""

    def __init__(self, image_client: ImageGenerationClient):
        self.image_client = image_client

    async def generate(self, original_name: str, pinyin_name: str, keywords: Sequence[str]) -> str:
        prompt = build_image_prompt(original_name, pinyin_name, keywords)
        try:
            return await self.image_client.generate_image(prompt)
        except ConfigurationError:
            raise
        except Exception as e:
            logger.error("Error generating image", name=original_name, error=str(e))
            raise EndpointError(f"Failed to generate image. {e}", endpoint="image") from e
