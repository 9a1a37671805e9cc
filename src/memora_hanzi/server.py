"""
HTTP API for MemoraHanzi.

Each request runs against a fresh pipeline, so the API keeps no state
between calls. Image generation takes the Pinyin and keywords a client
got back from ``/names/process`` (possibly edited).
"""

from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .config.dependencies import Dependencies, create_dependencies
from .constants import APP_NAME
from .errors import ConfigurationError, EndpointError, InputValidationError
from .models import AuthorRecord, NameRecord
from .utils.logging import get_logger
from .workflows.name_processing import (
    IMAGE_PREREQUISITES_MESSAGE,
    TOO_SHORT_MESSAGE,
    build_author_classifier,
    build_pipeline,
)

logger = get_logger(__name__)


class ProcessNameRequest(BaseModel):
    name: str


class GenerateImageRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    original_name: str
    pinyin: str = ""
    keywords: List[str] = Field(default_factory=list)


class ClassifyAuthorsRequest(BaseModel):
    text: str


_dependencies: Optional[Dependencies] = None


def get_dependencies() -> Dependencies:
    """Return the process-wide clients, creating them on first use."""
    global _dependencies
    if _dependencies is None:
        _dependencies = create_dependencies()
    return _dependencies


def _raise_for_configuration(deps: Dependencies) -> None:
    if not deps.is_configured:
        raise HTTPException(
            status_code=503,
            detail="Gemini AI SDK not initialized: GEMINI_API_KEY environment variable not found.",
        )


def init_app() -> FastAPI:
    """
    Initialize and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application
    """
    app = FastAPI(title=APP_NAME)

    @app.get("/health")
    async def health():
        """Simple health check endpoint that always returns OK."""
        logger.debug("Health check request received")
        return {"status": "ok"}

    @app.get("/ready")
    async def ready(deps: Dependencies = Depends(get_dependencies)):
        """Readiness check; not ready until an API key is configured."""
        if not deps.is_configured:
            raise HTTPException(status_code=503, detail="GEMINI_API_KEY is not set")
        return {"status": "ready"}

    @app.post("/names/process", response_model=NameRecord, response_model_exclude_none=True)
    async def process_name(request: ProcessNameRequest, deps: Dependencies = Depends(get_dependencies)):
        """Resolve Pinyin and brainstorm keywords for one name."""
        if len(request.name.strip()) < deps.settings.min_name_length:
            raise HTTPException(status_code=400, detail=TOO_SHORT_MESSAGE)
        _raise_for_configuration(deps)
        pipeline = build_pipeline(deps)
        return await pipeline.submit(request.name)

    @app.post("/names/image", response_model=NameRecord, response_model_exclude_none=True)
    async def generate_image(request: GenerateImageRequest, deps: Dependencies = Depends(get_dependencies)):
        """Generate the mnemonic image from Pinyin and keywords."""
        pipeline = build_pipeline(deps)
        try:
            pipeline.resume(request.original_name, request.pinyin, request.keywords)
        except InputValidationError as e:
            raise HTTPException(status_code=400, detail=str(e))
        if not pipeline.can_generate_image:
            raise HTTPException(status_code=400, detail=IMAGE_PREREQUISITES_MESSAGE)
        _raise_for_configuration(deps)
        return await pipeline.generate_image()

    @app.post("/authors/classify", response_model=List[AuthorRecord])
    async def classify_authors(request: ClassifyAuthorsRequest, deps: Dependencies = Depends(get_dependencies)):
        """Flag potentially Chinese names in a pasted author list."""
        classifier = build_author_classifier(deps)
        try:
            return await classifier.classify_authors(request.text)
        except InputValidationError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except ConfigurationError as e:
            raise HTTPException(status_code=503, detail=str(e))
        except EndpointError as e:
            raise HTTPException(status_code=502, detail=str(e))

    logger.info("Server initialization complete")
    return app


app = init_app()
