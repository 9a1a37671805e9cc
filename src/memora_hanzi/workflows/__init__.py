from .name_processing import NameProcessingPipeline, build_pipeline, build_author_classifier

__all__ = ["NameProcessingPipeline", "build_pipeline", "build_author_classifier"]
