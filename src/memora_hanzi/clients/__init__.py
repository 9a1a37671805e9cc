"""Clients for the hosted Gemini endpoints."""

from .text_generation import TextGenerationClient
from .image_generation import ImageGenerationClient

__all__ = ["TextGenerationClient", "ImageGenerationClient"]
