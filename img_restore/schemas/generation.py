"""
Schemas - Request/Response Models for the Image Generation Service

Provider-neutral shapes of a single content generation call. Adapters
translate these to and from their SDK types, so nothing outside
img_restore.providers knows which remote service is in use.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class InlineData(BaseModel):
    """Image bytes embedded directly in a part."""
    data: bytes
    mime_type: str


class Part(BaseModel):
    """
    One ordered piece of a request or response. Exactly one of 'text' or
    'inline_data' is set.
    """
    text: Optional[str] = None
    inline_data: Optional[InlineData] = None

    @model_validator(mode="after")
    def _exactly_one_payload(self):
        if (self.text is None) == (self.inline_data is None):
            raise ValueError("A part carries either text or inline_data")
        return self


class GenerationRequest(BaseModel):
    model: str = Field(..., description="Remote model identifier.")
    parts: List[Part] = Field(..., min_length=1)


class Candidate(BaseModel):
    parts: List[Part] = Field(default_factory=list)


class GenerationResponse(BaseModel):
    candidates: List[Candidate] = Field(default_factory=list)
