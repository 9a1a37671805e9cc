from .records import NameRecord, AuthorRecord, PipelineStage, IN_FLIGHT_STAGES
from .keywords import EditableKeywordSet
from .responses import PinyinResponse, KeywordsResponse, IdentifiedNamesResponse

__all__ = [
    "NameRecord",
    "AuthorRecord",
    "PipelineStage",
    "IN_FLIGHT_STAGES",
    "EditableKeywordSet",
    "PinyinResponse",
    "KeywordsResponse",
    "IdentifiedNamesResponse",
]
