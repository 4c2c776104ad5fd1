"""
IMG Restore

Old photo restoration through a remote image generation model: a
deterministic prompt builder, a lifecycle state machine around the remote
call, and a before/after comparison slider.
"""

from img_restore.domain import (
    ArtStyle,
    DownloadArtifact,
    ImageAsset,
    Quality,
    RestorationOptions,
)
from img_restore.state import (
    EmptyState,
    ErrorInfo,
    FailedState,
    LoadedState,
    ProcessingState,
    RestoredState,
    WorkflowState,
)
from img_restore.restoration import RestorationRequest, build_prompt
from img_restore.comparison import ComparisonSliderController, ListenerRegistry
from img_restore.workflow import WorkflowController

__all__ = [
    # Domain Layer
    "ArtStyle",
    "DownloadArtifact",
    "ImageAsset",
    "Quality",
    "RestorationOptions",
    # State Layer
    "EmptyState",
    "ErrorInfo",
    "FailedState",
    "LoadedState",
    "ProcessingState",
    "RestoredState",
    "WorkflowState",
    # Restoration Layer
    "RestorationRequest",
    "build_prompt",
    # Comparison Layer
    "ComparisonSliderController",
    "ListenerRegistry",
    # Workflow Layer
    "WorkflowController",
]
