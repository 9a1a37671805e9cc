"""Flags names in a pasted author list that are likely Chinese."""

from typing import List

from ..clients import TextGenerationClient
from ..constants import MIN_AUTHOR_NAME_LENGTH
from ..errors import ConfigurationError, EndpointError, InputValidationError
from ..models import AuthorRecord, IdentifiedNamesResponse
from ..prompts import AUTHOR_CLASSIFICATION_PROMPT
from ..utils.logging import get_logger
from ..utils.text_utils import split_author_list

logger = get_logger(__name__)

class AuthorClassifier:
    """Single best-effort classification of an author list.

    There is no retry: a malformed reply means no names are flagged.
    """

    def __init__(self, text_client: TextGenerationClient, min_name_length: int = MIN_AUTHOR_NAME_LENGTH):
        self.text_client = text_client
        self.min_name_length = min_name_length

    async def classify_authors(self, raw_text: str) -> List[AuthorRecord]:
        """
        Split ``raw_text`` into names and mark the likely Chinese ones.

        Raises:
            InputValidationError: If no valid names are found
            EndpointError: If the classification request fails
        """
        if not raw_text or not raw_text.strip():
            raise InputValidationError("Please paste a list of authors.")

        names = split_author_list(raw_text, self.min_name_length)
        if not names:
            raise InputValidationError(
                f"No valid author names found. Ensure names are at least {self.min_name_length} "
                "characters long and separated by commas, semicolons, or newlines."
            )

        prompt = AUTHOR_CLASSIFICATION_PROMPT.format(author_list="\n".join(names))
        try:
            result = await self.text_client.generate_structured(
                prompt,
                IdentifiedNamesResponse,
                IdentifiedNamesResponse(identified_names=[]),
            )
        except ConfigurationError:
            raise
        except Exception as e:
            logger.error("Error identifying Chinese names", error=str(e))
            raise EndpointError(f"Failed to identify Chinese names. {e}") from e

        identified = set(result.identified_names)
        authors = [
            AuthorRecord(id=f"{name}-{index}", name=name, is_potentially_chinese=name in identified)
            for index, name in enumerate(names)
        ]
        logger.info(
            "Classified author list",
            candidates=len(authors),
            flagged=sum(1 for author in authors if author.is_potentially_chinese)
        )
        return authors
