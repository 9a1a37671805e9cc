"""Expected JSON shapes of the text endpoint replies."""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


class PinyinResponse(BaseModel):
    pinyin: str


class KeywordsResponse(BaseModel):
    keywords: List[str]


class IdentifiedNamesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    identified_names: List[str] = Field(..., alias="identifiedNames")
