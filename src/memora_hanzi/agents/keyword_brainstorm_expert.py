"""Keyword brainstorming with retry and exponential backoff."""

import asyncio
from typing import Awaitable, Callable, List, Optional

from ..clients import TextGenerationClient
from ..errors import ConfigurationError, KeywordGenerationError
from ..models import KeywordsResponse
from ..prompts import KEYWORDS_PROMPT
from ..utils.logging import get_logger

logger = get_logger(__name__)

class KeywordBrainstormExpert:
    """Brainstorms English phonetic-association keywords for a Pinyin name.

    Attempts run one after another. An attempt fails if the call raises or
    the reply has no non-blank keywords; the delay before attempt ``n + 1``
    is ``backoff ** n`` seconds. Returned keywords are trimmed and unique.
    """

    def __init__(
        self,
        text_client: TextGenerationClient,
        max_attempts: int = 3,
        backoff: float = 2,
        temperature: Optional[float] = 0.7,
        max_output_tokens: Optional[int] = 1024,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.text_client = text_client
        self.max_attempts = max_attempts
        self.backoff = backoff
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self._sleep = sleep

    def _calculate_retry_delay(self, attempt: int) -> float:
        """Delay in seconds after failed attempt ``attempt`` (numbered from 1)."""
        return self.backoff ** attempt

    async def _attempt(self, pinyin_name: str) -> List[str]:
        clean_pinyin_name = pinyin_name.strip()
        if not clean_pinyin_name:
            raise ValueError("Pinyin name cannot be empty")

        result = await self.text_client.generate_structured(
            KEYWORDS_PROMPT.format(pinyin_name=clean_pinyin_name),
            KeywordsResponse,
            KeywordsResponse(keywords=[]),
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
        )
        keywords = []
        for keyword in result.keywords:
            keyword = keyword.strip()
            if keyword and keyword not in keywords:
                keywords.append(keyword)
        if not keywords:
            raise ValueError("Invalid response format or empty keywords")
        return keywords

    async def brainstorm(self, pinyin_name: str) -> List[str]:
        """
        Return 3-5 keywords for ``pinyin_name``.

        Raises:
            KeywordGenerationError: If every attempt fails
            ConfigurationError: If no API key is configured
        """
        last_error: Optional[Exception] = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                keywords = await self._attempt(pinyin_name)
                logger.info("Brainstormed keywords", pinyin=pinyin_name, attempt=attempt, keywords=keywords)
                return keywords
            except ConfigurationError:
                raise
            except Exception as e:
                last_error = e
                logger.warning(
                    "Keyword attempt failed",
                    pinyin=pinyin_name,
                    attempt=attempt,
                    max_attempts=self.max_attempts,
                    error=str(e)
                )

            if attempt < self.max_attempts:
                await self._sleep(self._calculate_retry_delay(attempt))

        raise KeywordGenerationError(
            f"Failed to get keywords for {pinyin_name} after {self.max_attempts} attempts. "
            f"Last error: {last_error}",
            attempts=self.max_attempts,
            last_error=last_error,
        )
