"""
API Layer - Request/Response Schemas

Pydantic models for API request and response validation.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from ..domain.models import ArtStyle, Quality


class CreateSessionResponse(BaseModel):
    session_id: str


class OptionsUpdate(BaseModel):
    """Partial update; omitted fields keep their current value."""
    quality: Optional[Quality] = None
    colorize: Optional[bool] = None
    style: Optional[ArtStyle] = None


class OptionsRead(BaseModel):
    quality: Quality
    colorize: bool
    style: ArtStyle


class ErrorRead(BaseModel):
    kind: str
    message: str


class SliderRead(BaseModel):
    active: bool
    position: float


class SessionRead(BaseModel):
    session_id: str
    status: str
    options: OptionsRead
    # The snapshot a running restoration was dispatched with.
    processing_options: Optional[OptionsRead] = None
    original: Optional[str] = Field(None, description="Original image as a data URI.")
    restored: Optional[str] = Field(None, description="Restored image as a data URI.")
    error: Optional[ErrorRead] = None
    slider: SliderRead
    created_at: datetime


class ContainerRead(BaseModel):
    left: float
    width: float


class ComparisonEvent(BaseModel):
    """
    One input event forwarded from the client. Mouse events carry client_x,
    touch events carry the client_x of each touch point.
    """
    type: Literal["mousedown", "mousemove", "mouseup", "touchstart", "touchmove", "touchend"]
    client_x: Optional[float] = None
    touches: List[float] = Field(default_factory=list)
    container: Optional[ContainerRead] = None
