"""
State Layer - Runtime Data Models

This module defines the lifecycle state of a restoration workflow as a
tagged variant. Exactly one of the state models below is active at a time;
the WorkflowController replaces it wholesale on every transition.

    EMPTY ──upload──> LOADED ──restore──> PROCESSING ──ok──> RESTORED
                         ^                     │
                         │                     └──error──> FAILED
                         └───────────upload (from any state)
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from ..domain.models import ImageAsset, RestorationOptions


class ErrorInfo(BaseModel):
    """
    A failed restoration attempt.

    kind: Machine-readable error kind (e.g. "NoImageReturned").
    message: Human-readable message shown to the user.
    """
    model_config = ConfigDict(frozen=True)

    kind: str
    message: str


class EmptyState(BaseModel):
    """No image uploaded."""
    model_config = ConfigDict(frozen=True)

    status: Literal["EMPTY"] = "EMPTY"


class LoadedState(BaseModel):
    """An original image is present and no restoration has been attempted."""
    model_config = ConfigDict(frozen=True)

    status: Literal["LOADED"] = "LOADED"
    original: ImageAsset


class ProcessingState(BaseModel):
    """
    A restoration call is outstanding. 'options' is the snapshot the request
    was dispatched with, not the live selection.
    """
    model_config = ConfigDict(frozen=True)

    status: Literal["PROCESSING"] = "PROCESSING"
    original: ImageAsset
    options: RestorationOptions


class RestoredState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["RESTORED"] = "RESTORED"
    original: ImageAsset
    restored: ImageAsset


class FailedState(BaseModel):
    """The last attempt failed. The original is kept so the user can retry."""
    model_config = ConfigDict(frozen=True)

    status: Literal["FAILED"] = "FAILED"
    original: ImageAsset
    error: ErrorInfo


WorkflowState = Annotated[
    Union[EmptyState, LoadedState, ProcessingState, RestoredState, FailedState],
    Field(discriminator="status"),
]
