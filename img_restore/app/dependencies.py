"""
Dependency Injection Wiring (Composition Root).

This module acts as the central "container" for the application's services.
It is responsible for:
1. Instantiating the Singleton services (Provider Adapter, Request, Repository).
2. Wiring them together (e.g., injecting the Provider into the RestorationRequest).
3. Managing their lifecycle using @lru_cache so they are created only once
   per application process.

Tests replace get_session_repository through app.dependency_overrides.
"""

from functools import lru_cache, partial

from ..config import get_settings
from ..providers.interface import ImageGenerationProvider
from ..providers.adapters.gemini_adapter import GeminiAdapter
from ..providers.adapters.openai_adapter import OpenAIAdapter
from ..restoration.request import RestorationRequest
from ..repositories.session import SessionRepository, InMemorySessionRepository
from .files import read_upload


# Image Provider (Singleton)
@lru_cache()
def get_image_provider() -> ImageGenerationProvider:
    settings = get_settings()
    if settings.DEFAULT_IMAGE_PROVIDER == "openai":
        return OpenAIAdapter(api_key=settings.OPENAI_API_KEY)
    if not settings.GEMINI_API_KEY:
        raise RuntimeError("GEMINI_API_KEY must be set to use the gemini provider")
    return GeminiAdapter(api_key=settings.GEMINI_API_KEY)


# The Restoration Request (Singleton)
@lru_cache()
def get_restoration_request() -> RestorationRequest:
    settings = get_settings()
    model_name = (
        settings.OPENAI_IMAGE_MODEL
        if settings.DEFAULT_IMAGE_PROVIDER == "openai"
        else settings.GEMINI_MODEL
    )
    return RestorationRequest(provider=get_image_provider(), model_name=model_name)


# Session Repository (Singleton)
# Note: In-memory storage must be a singleton so sessions survive across requests!
@lru_cache()
def get_session_repository() -> SessionRepository:
    settings = get_settings()
    return InMemorySessionRepository(
        restorer=get_restoration_request(),
        file_reader=partial(read_upload, max_bytes=settings.MAX_UPLOAD_BYTES),
        max_upload_bytes=settings.MAX_UPLOAD_BYTES,
        download_filename=settings.DOWNLOAD_FILENAME,
    )
