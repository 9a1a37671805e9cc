"""Per-name processing pipeline.

Stages run in order: script detection, Pinyin resolution, keyword
brainstorm. Image generation runs only when the user asks for it. Only one
name is active at a time; submitting a new name replaces all state for the
previous one.

There is no way to cancel an in-flight call, so every run is tagged with the
pipeline's generation counter. A run whose generation is no longer current
drops its results instead of writing them.
"""

from typing import List, Optional

from ..agents import (
    AuthorClassifier,
    KeywordBrainstormExpert,
    MnemonicImageExpert,
    PinyinExpert,
)
from ..config.dependencies import Dependencies
from ..constants import MIN_AUTHOR_NAME_LENGTH
from ..errors import InputValidationError
from ..models import (
    IN_FLIGHT_STAGES,
    EditableKeywordSet,
    NameRecord,
    PipelineStage,
)
from ..utils.logging import get_logger
from ..utils.text_utils import is_likely_hanzi, split_syllables

logger = get_logger(__name__)

TOO_SHORT_MESSAGE = "Name is too short to process."
NO_PINYIN_MESSAGE = "Could not derive Pinyin. Try entering Pinyin directly."
IMAGE_PREREQUISITES_MESSAGE = "Pinyin and keywords are needed to generate an image."


class NameProcessingPipeline:
    """State machine driving one name at a time through the stage experts."""

    def __init__(
        self,
        pinyin_expert: PinyinExpert,
        keyword_expert: KeywordBrainstormExpert,
        image_expert: MnemonicImageExpert,
        min_name_length: int = MIN_AUTHOR_NAME_LENGTH,
    ):
        self.pinyin_expert = pinyin_expert
        self.keyword_expert = keyword_expert
        self.image_expert = image_expert
        self.min_name_length = min_name_length

        self.stage = PipelineStage.IDLE
        self.record: Optional[NameRecord] = None
        self.keywords = EditableKeywordSet()
        self.generation = 0

    def _is_current(self, generation: int) -> bool:
        return generation == self.generation

    def _start(self, name: str) -> int:
        self.generation += 1
        self.record = NameRecord(original_name=name)
        self.keywords = EditableKeywordSet()
        self.stage = PipelineStage.IDLE
        return self.generation

    def _fail(self, record: NameRecord, message: str) -> None:
        record.error = message
        self.stage = PipelineStage.ERRORED
        logger.warning("Name processing failed", name=record.original_name, error=message)

    @property
    def is_busy(self) -> bool:
        return self.stage in IN_FLIGHT_STAGES

    @property
    def can_generate_image(self) -> bool:
        return (
            self.record is not None
            and bool(self.record.pinyin)
            and bool(self.keywords)
            and not self.is_busy
        )

    async def submit(self, name: str) -> NameRecord:
        """
        Start processing ``name``, discarding any previous name.

        Errors are never raised; they are written to the returned record's
        ``error`` field. If another name is submitted while this one is
        still running, this run stops writing and returns its own record.
        """
        generation = self._start(name)
        record = self.record

        if not name or len(name.strip()) < self.min_name_length:
            self._fail(record, TOO_SHORT_MESSAGE)
            return record

        clean_name = name.strip()
        logger.info("Processing name", name=clean_name, generation=generation)
        self.stage = PipelineStage.DETECTING_SCRIPT

        try:
            if is_likely_hanzi(clean_name):
                self.stage = PipelineStage.RESOLVING_PINYIN
                pinyin = await self.pinyin_expert.resolve(clean_name)
                if not self._is_current(generation):
                    logger.info("Discarding superseded Pinyin result", name=clean_name)
                    return record
                if not pinyin:
                    self._fail(record, NO_PINYIN_MESSAGE)
                    return record
            else:
                # Not Hanzi, so treat the input as Pinyin already
                pinyin = clean_name

            record.pinyin = pinyin
            record.syllables = split_syllables(pinyin)

            self.stage = PipelineStage.BRAINSTORMING_KEYWORDS
            keywords = await self.keyword_expert.brainstorm(pinyin)
            if not self._is_current(generation):
                logger.info("Discarding superseded keyword result", name=clean_name)
                return record

            self.keywords.replace(keywords)
            record.keywords = self.keywords.as_list()
            self.stage = PipelineStage.READY
        except Exception as e:
            if self._is_current(generation):
                self._fail(record, f"Processing Error: {e}")
        return record

    def resume(self, original_name: str, pinyin: str, keywords: List[str]) -> NameRecord:
        """
        Start a session directly in the ready state from known results.

        Raises:
            InputValidationError: If ``original_name`` is too short
        """
        if not original_name or len(original_name.strip()) < self.min_name_length:
            raise InputValidationError(TOO_SHORT_MESSAGE)
        self._start(original_name)
        record = self.record
        record.pinyin = pinyin
        record.syllables = split_syllables(pinyin)
        self.keywords.replace(keywords)
        record.keywords = self.keywords.as_list()
        self.stage = PipelineStage.READY
        return record

    def add_keyword(self, keyword: str) -> bool:
        return self.keywords.add(keyword)

    def remove_keyword(self, keyword: str) -> bool:
        return self.keywords.remove(keyword)

    async def generate_image(self) -> NameRecord:
        """
        Generate the mnemonic image from the current Pinyin and keyword set.

        Missing Pinyin or keywords is reported on the record without any
        network call. An image failure keeps Pinyin and keywords.

        Raises:
            InputValidationError: If no name has been submitted yet
        """
        record = self.record
        if record is None:
            raise InputValidationError("Submit a name before generating an image.")
        if self.is_busy:
            logger.warning("Image requested while processing is in progress", stage=self.stage.value)
            return record
        if not record.pinyin or not self.keywords:
            record.error = IMAGE_PREREQUISITES_MESSAGE
            return record

        generation = self.generation
        keywords = self.keywords.as_list()
        record.image_url = None
        record.error = None
        self.stage = PipelineStage.GENERATING_IMAGE

        try:
            image_url = await self.image_expert.generate(record.original_name, record.pinyin, keywords)
        except Exception as e:
            if self._is_current(generation):
                self._fail(record, f"Image Generation Error: {e}")
            return record

        if self._is_current(generation):
            record.image_url = image_url
            self.stage = PipelineStage.READY
        else:
            logger.info("Discarding superseded image", name=record.original_name)
        return record


def build_pipeline(dependencies: Dependencies) -> NameProcessingPipeline:
    """Wire a pipeline from the configured clients."""
    settings = dependencies.settings
    return NameProcessingPipeline(
        pinyin_expert=PinyinExpert(dependencies.text_client),
        keyword_expert=KeywordBrainstormExpert(
            dependencies.text_client,
            max_attempts=settings.keyword_max_attempts,
            backoff=settings.retry_backoff,
            temperature=settings.keyword_temperature,
            max_output_tokens=settings.keyword_max_output_tokens,
        ),
        image_expert=MnemonicImageExpert(dependencies.image_client),
        min_name_length=settings.min_name_length,
    )


def build_author_classifier(dependencies: Dependencies) -> AuthorClassifier:
    return AuthorClassifier(dependencies.text_client, dependencies.settings.min_name_length)
