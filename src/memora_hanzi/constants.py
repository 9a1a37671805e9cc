"""Application-wide constants."""

APP_NAME = "MemoraHanzi"

# Gemini model names
TEXT_MODEL_NAME = "gemini-2.5-flash"
IMAGE_MODEL_NAME = "imagen-3.0-generate-002"

ARXIV_DISCLAIMER_TEXT = (
    "Disclaimer: The identification of 'Chinese-sounding' names is based on AI analysis "
    "of common patterns and surname lists. This is an automated heuristic and may be "
    "inaccurate. It does not confirm nationality or ethnicity. Always verify information "
    "independently."
)

MIN_AUTHOR_NAME_LENGTH = 2  # Minimum length for a name to be considered for processing

DEFAULT_SPEECH_LANGUAGE = "zh-CN"
