"""JSON parsing utilities for handling Gemini-generated JSON."""

import json
import re
from typing import Any, TypeVar

from .logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

# Matches ```json ... ``` or ``` ... ```
_FENCE_PATTERN = re.compile(r"^```(\w*)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)


def strip_code_fence(text: str) -> str:
    """Remove one surrounding markdown code fence, if present."""
    json_str = text.strip()
    match = _FENCE_PATTERN.match(json_str)
    if match and match.group(2):
        json_str = match.group(2).strip()
    return json_str


def parse_json_response(text: str, fallback: T) -> Any:
    """
    Parse a JSON reply, returning ``fallback`` when it is not valid JSON.

    Args:
        text (str): Raw text returned by the model
        fallback: Value returned when parsing fails

    Returns:
        The decoded JSON value, or ``fallback``
    """
    try:
        return json.loads(strip_code_fence(text))
    except (json.JSONDecodeError, TypeError) as e:
        logger.error(
            "Failed to parse JSON from Gemini response",
            error=str(e),
            raw_response=text
        )
        return fallback
