"""Exception hierarchy for MemoraHanzi."""

from typing import Optional


class MemoraHanziError(Exception):
    """Base class for all MemoraHanzi errors."""


class ConfigurationError(MemoraHanziError):
    """Raised when the Gemini credential is missing."""


class InputValidationError(MemoraHanziError):
    """Raised when user input fails a precondition before any network call."""


class EndpointError(MemoraHanziError):
    """Raised when a hosted endpoint call fails or returns unusable data.

    Attributes:
        endpoint: Which hosted endpoint failed ("text" or "image")
        model: Model identifier the request was sent to
    """

    def __init__(self, message: str, endpoint: Optional[str] = None, model: Optional[str] = None):
        super().__init__(message)
        self.endpoint = endpoint
        self.model = model


class KeywordGenerationError(MemoraHanziError):
    """Raised when keyword brainstorming fails on every attempt."""

    def __init__(self, message: str, attempts: int, last_error: Optional[BaseException] = None):
        super().__init__(message)
        self.attempts = attempts
        self.last_error = last_error
