"""Pinyin resolution for names written in Hanzi."""

from ..clients import TextGenerationClient
from ..errors import ConfigurationError, EndpointError
from ..models import PinyinResponse
from ..prompts import PINYIN_PROMPT
from ..utils.logging import get_logger

logger = get_logger(__name__)

class PinyinExpert:
    """Looks up tone-marked Pinyin for a Hanzi name."""

    def __init__(self, text_client: TextGenerationClient):
        self.text_client = text_client
        self.role = "Pinyin Expert"

    async def resolve(self, hanzi_name: str) -> str:
        """
        Return space-separated, tone-marked Pinyin for ``hanzi_name``.

        A malformed reply yields an empty string rather than an error.
        """
        prompt = PINYIN_PROMPT.format(hanzi_name=hanzi_name)
        try:
            result = await self.text_client.generate_structured(
                prompt, PinyinResponse, PinyinResponse(pinyin="")
            )
        except ConfigurationError:
            raise
        except Exception as e:
            logger.error("Error getting Pinyin", name=hanzi_name, error=str(e))
            raise EndpointError(f"Failed to get Pinyin for {hanzi_name}. {e}") from e

        pinyin = result.pinyin.strip()
        logger.info("Resolved Pinyin", name=hanzi_name, pinyin=pinyin)
        return pinyin
