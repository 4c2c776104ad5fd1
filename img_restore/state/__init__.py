"""
State Layer - Runtime Data Models

Defines the lifecycle states of a restoration workflow.
"""

from img_restore.state.models import (
    EmptyState,
    ErrorInfo,
    FailedState,
    LoadedState,
    ProcessingState,
    RestoredState,
    WorkflowState,
)

__all__ = [
    "EmptyState",
    "ErrorInfo",
    "FailedState",
    "LoadedState",
    "ProcessingState",
    "RestoredState",
    "WorkflowState",
]
