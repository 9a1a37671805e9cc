from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PipelineStage(str, Enum):
    """Stages of the per-name processing state machine."""

    IDLE = "idle"
    DETECTING_SCRIPT = "detecting_script"
    RESOLVING_PINYIN = "resolving_pinyin"
    BRAINSTORMING_KEYWORDS = "brainstorming_keywords"
    READY = "ready"
    GENERATING_IMAGE = "generating_image"
    ERRORED = "errored"


IN_FLIGHT_STAGES = frozenset({
    PipelineStage.DETECTING_SCRIPT,
    PipelineStage.RESOLVING_PINYIN,
    PipelineStage.BRAINSTORMING_KEYWORDS,
    PipelineStage.GENERATING_IMAGE,
})


class NameRecord(BaseModel):
    """Everything derived so far for the name being processed.

    Fields are filled in stage by stage; a new submission replaces the
    whole record.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    original_name: str = Field(..., description="Name exactly as submitted")
    pinyin: Optional[str] = Field(None, description="Tone-marked Pinyin, space-separated")
    syllables: Optional[List[str]] = Field(None, description="Pinyin split into syllables")
    keywords: Optional[List[str]] = Field(None, description="Keywords from the brainstorm stage")
    image_url: Optional[str] = Field(None, description="Mnemonic image as a data URI")
    error: Optional[str] = Field(None, description="Human-readable error for the last failed step")


class AuthorRecord(BaseModel):
    """One candidate name from a pasted author list."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    name: str
    is_potentially_chinese: bool = False
