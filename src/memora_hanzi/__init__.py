"""
MemoraHanzi - Gemini-powered helper for memorising Chinese names.
"""

from .models import NameRecord, AuthorRecord, PipelineStage
from .workflows.name_processing import NameProcessingPipeline, build_pipeline, build_author_classifier

__version__ = "0.1.0"

__all__ = [
    "NameRecord",
    "AuthorRecord",
    "PipelineStage",
    "NameProcessingPipeline",
    "build_pipeline",
    "build_author_classifier",
]
