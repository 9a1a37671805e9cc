"""Client for the hosted Gemini text endpoint."""

from typing import Any, Callable, Dict, Optional, Tuple, Type, TypeVar

from langchain_google_genai import ChatGoogleGenerativeAI
from pydantic import BaseModel, ValidationError

from ..constants import TEXT_MODEL_NAME
from ..errors import ConfigurationError, EndpointError
from ..utils.json_parser import parse_json_response
from ..utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)

_UNPARSED = object()


def _response_text(response: Any) -> str:
    """Flatten a chat model reply to plain text."""
    content = getattr(response, "content", response)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type", "text") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)
    return str(content)


class TextGenerationClient:
    """Requests JSON replies from Gemini and validates them.

    Parse and validation failures fall back to a caller-supplied value so
    that one malformed reply only degrades a single stage. Transport
    failures are raised as ``EndpointError``.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model_name: str = TEXT_MODEL_NAME,
        callbacks: Optional[list] = None,
        llm_factory: Optional[Callable[..., Any]] = None,
    ):
        self.api_key = api_key
        self.model_name = model_name
        self.callbacks = callbacks
        self._llm_factory = llm_factory or ChatGoogleGenerativeAI
        self._llms: Dict[Tuple[Optional[float], Optional[int]], Any] = {}

    def _get_llm(self, temperature: Optional[float], max_output_tokens: Optional[int]):
        key = (temperature, max_output_tokens)
        if key not in self._llms:
            kwargs: Dict[str, Any] = {
                "model": self.model_name,
                "google_api_key": self.api_key,
                "response_mime_type": "application/json",
                "callbacks": self.callbacks,
            }
            if temperature is not None:
                kwargs["temperature"] = temperature
            if max_output_tokens is not None:
                kwargs["max_output_tokens"] = max_output_tokens
            self._llms[key] = self._llm_factory(**kwargs)
        return self._llms[key]

    async def generate_structured(
        self,
        prompt: str,
        response_model: Type[T],
        fallback: T,
        *,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
    ) -> T:
        """
        Send ``prompt`` and parse the reply into ``response_model``.

        Args:
            prompt (str): Prompt asking for a JSON reply
            response_model: Pydantic model describing the expected JSON shape
            fallback: Returned when the reply is not valid JSON of that shape
            temperature: Optional sampling temperature
            max_output_tokens: Optional cap on reply length

        Returns:
            A ``response_model`` instance, or ``fallback``

        Raises:
            ConfigurationError: If no API key is configured
            EndpointError: If the request itself fails
        """
        if not self.api_key:
            raise ConfigurationError(
                "Gemini AI SDK not initialized: GEMINI_API_KEY environment variable not found."
            )

        llm = self._get_llm(temperature, max_output_tokens)
        logger.debug("Sending text generation request", model=self.model_name)
        try:
            response = await llm.ainvoke(prompt)
        except Exception as e:
            logger.error("Text generation request failed", model=self.model_name, error=str(e))
            raise EndpointError(
                f"Text generation request to {self.model_name} failed: {e}",
                endpoint="text",
                model=self.model_name,
            ) from e

        text = _response_text(response)
        data = parse_json_response(text, _UNPARSED)
        if data is _UNPARSED:
            return fallback
        try:
            return response_model.model_validate(data)
        except ValidationError as e:
            logger.error(
                "Gemini response did not match the expected shape",
                response_model=response_model.__name__,
                error=str(e),
                raw_response=text
            )
            return fallback
