"""Configuration management for MemoraHanzi.

Settings are read from the process environment and an optional ``.env``
file. Core components never read the module-level ``settings`` instance
themselves; the surfaces pass values in through ``create_dependencies``.
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import (
    TEXT_MODEL_NAME,
    IMAGE_MODEL_NAME,
    MIN_AUTHOR_NAME_LENGTH,
    DEFAULT_SPEECH_LANGUAGE,
)


class Settings(BaseSettings):
    """Configuration settings for the name processing pipeline."""

    # Model configuration
    gemini_api_key: Optional[str] = None
    text_model_name: str = TEXT_MODEL_NAME
    image_model_name: str = IMAGE_MODEL_NAME

    @property
    def google_api_key(self) -> Optional[str]:
        """Return the Gemini API key under the name LangChain expects."""
        return self.gemini_api_key

    # Pipeline configuration
    min_name_length: int = MIN_AUTHOR_NAME_LENGTH

    # Keyword brainstorm tuning and retry configuration
    keyword_max_attempts: int = 3
    retry_backoff: int = 2
    keyword_temperature: float = 0.7
    keyword_max_output_tokens: int = 1024

    # Speech playback
    speech_language: str = DEFAULT_SPEECH_LANGUAGE

    # LangSmith configuration
    langchain_tracing_v2: bool = False
    langchain_project: str = "memora-hanzi"

    def get_langsmith_callbacks(self):
        """Return LangSmith callbacks if tracing is enabled."""
        if self.langchain_tracing_v2:
            from langchain_core.tracers import LangChainTracer
            return [LangChainTracer(project_name=self.langchain_project)]
        return None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


# Global settings instance
settings = Settings()
