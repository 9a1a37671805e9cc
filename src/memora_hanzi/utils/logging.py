"""
structlog setup for MemoraHanzi.

Logs go through the stdlib root logger so library output (LangChain, the
Gemini SDKs, uvicorn) ends up in the same stream. Names and Pinyin are
logged as-is, so the JSON renderer must not escape non-ASCII text.
"""

import logging
import os
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

# SDK loggers that log every HTTP request at INFO
_CHATTY_LOGGERS = ("httpx", "httpcore", "google_genai", "urllib3")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def setup_logging(
    level: str = "INFO",
    json_format: bool = True,
    log_file: Optional[str] = None
) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        json_format: Render one JSON object per line instead of the console format
        log_file: Also write to this file when set
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        logging.getLogger().addHandler(file_handler)

    if log_level > logging.DEBUG:
        for name in _CHATTY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    renderer = (
        structlog.processors.JSONRenderer(ensure_ascii=False)
        if json_format
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> BoundLogger:
    return structlog.get_logger(name)


setup_logging(
    level=os.getenv("LOG_LEVEL", "INFO"),
    json_format=_env_flag("LOG_JSON", True),
    log_file=os.getenv("LOG_FILE")
)
