"""
Schemas - Remote Service Models

Pydantic models describing the image generation call.
"""

from img_restore.schemas.generation import (
    Candidate,
    GenerationRequest,
    GenerationResponse,
    InlineData,
    Part,
)

__all__ = [
    "Candidate",
    "GenerationRequest",
    "GenerationResponse",
    "InlineData",
    "Part",
]
