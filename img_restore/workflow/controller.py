"""
Workflow Controller - Restoration Lifecycle State Machine

The WorkflowController owns the lifecycle state of one restoration session
and is the only place that changes it. The presentation layer reads
'state', forwards user intents (upload, option changes, restore, reset,
download) and never mutates anything itself.

Concurrency model
-----------------
Everything runs on one event loop. The remote call is the only suspension
point, and the PROCESSING state is entered before it is awaited, so a
second start_restoration() on the same controller sees PROCESSING and is
ignored. There is no cancellation: every start_restoration(), upload() and
reset() bumps a generation stamp, and a response that settles under an
outdated stamp is dropped instead of being applied to a state it no longer
belongs to.
"""

import asyncio
import logging
from dataclasses import replace
from typing import Any, Awaitable, Callable, Optional

from ..comparison.slider import ComparisonSliderController
from ..domain.models import (
    ArtStyle,
    DownloadArtifact,
    ImageAsset,
    Quality,
    RestorationOptions,
)
from ..restoration.prompts import build_prompt
from ..restoration.request import RestorationRequest
from ..services.exceptions import (
    InvalidTransitionError,
    PayloadTooLarge,
    RemoteError,
    RestorationError,
)
from ..state.models import (
    EmptyState,
    ErrorInfo,
    FailedState,
    LoadedState,
    ProcessingState,
    RestoredState,
    WorkflowState,
)

logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = 10 * 1024 * 1024
DOWNLOAD_FILENAME = "IMGRestore-Result.png"

# Reads a user-supplied file (multipart upload, dropped file, ...) into an ImageAsset.
FileReader = Callable[[Any], Awaitable[ImageAsset]]


class WorkflowController:
    def __init__(
        self,
        restorer: RestorationRequest,
        file_reader: Optional[FileReader] = None,
        slider: Optional[ComparisonSliderController] = None,
        max_upload_bytes: int = MAX_UPLOAD_BYTES,
        download_filename: str = DOWNLOAD_FILENAME,
    ):
        self.restorer = restorer
        self.file_reader = file_reader
        self.slider = slider
        self.max_upload_bytes = max_upload_bytes
        self.download_filename = download_filename

        self._state: WorkflowState = EmptyState()
        self._options = RestorationOptions()
        self._generation = 0

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def options(self) -> RestorationOptions:
        """The live option selection (not the snapshot of a running request)."""
        return self._options

    @property
    def original(self) -> Optional[ImageAsset]:
        return getattr(self._state, "original", None)

    @property
    def restored(self) -> Optional[ImageAsset]:
        return getattr(self._state, "restored", None)

    @property
    def is_processing(self) -> bool:
        return isinstance(self._state, ProcessingState)

    # ==========================================================================
    # Transitions
    # ==========================================================================

    def upload(self, asset: ImageAsset) -> WorkflowState:
        """
        Replaces the original image. Valid from any state.

        Raises:
            PayloadTooLarge: If the image exceeds the upload limit. The
                current state is left untouched.
        """
        if asset.size > self.max_upload_bytes:
            logger.warning(f"Rejected upload of {asset.size} bytes (limit {self.max_upload_bytes})")
            raise PayloadTooLarge(asset.size, self.max_upload_bytes)

        # A result still in flight belongs to the previous image.
        self._generation += 1
        self._state = LoadedState(original=asset)
        logger.info(f"Image loaded ({asset.mime_type}, {asset.size} bytes)")
        return self._state

    async def upload_file(self, file: Any) -> WorkflowState:
        """Reads a file through the configured reader and uploads it."""
        if self.file_reader is None:
            raise RuntimeError("No file reader configured")
        asset = await self.file_reader(file)
        return self.upload(asset)

    async def start_restoration(self) -> WorkflowState:
        """
        Restores the current original with a snapshot of the live options.

        Ignored while a restoration is already outstanding. Returns the state
        the controller is in once this call settles.

        Raises:
            InvalidTransitionError: If no image has been uploaded.
            asyncio.CancelledError: If the call is cancelled. The workflow is
                left FAILED so that a new attempt can be made; the same
                holds for any other unexpected exception, which is re-raised.
        """
        if isinstance(self._state, ProcessingState):
            logger.warning("Restoration already in progress; ignoring request")
            return self._state
        original = self.original
        if original is None:
            raise InvalidTransitionError("Upload an image before starting a restoration")

        options = self._options
        self._generation += 1
        stamp = self._generation
        self._state = ProcessingState(original=original, options=options)
        logger.info(
            f"Restoration #{stamp} started (quality={options.quality.value}, "
            f"colorize={options.colorize}, style={options.style.value})"
        )

        instruction = build_prompt(options)
        try:
            restored = await self.restorer.restore(original, instruction)
        except RestorationError as e:
            if self._is_stale(stamp):
                return self._state
            logger.error(f"Restoration #{stamp} failed: [{e.kind}] {e.message}")
            self._state = FailedState(
                original=original,
                error=ErrorInfo(kind=e.kind, message=e.message),
            )
            return self._state
        except BaseException as e:
            # Cancellation or an unexpected error must not leave the gate closed.
            if not self._is_stale(stamp):
                if isinstance(e, asyncio.CancelledError):
                    message = "Restoration was cancelled"
                else:
                    message = str(e) or type(e).__name__
                logger.error(f"Restoration #{stamp} aborted: {message}")
                self._state = FailedState(
                    original=original,
                    error=ErrorInfo(kind=RemoteError.kind, message=message),
                )
            raise

        if self._is_stale(stamp):
            return self._state
        self._state = RestoredState(original=original, restored=restored)
        logger.info(f"Restoration #{stamp} completed ({restored.size} bytes)")
        return self._state

    def reset(self) -> WorkflowState:
        """Back to EMPTY from any state; the comparison split returns to the middle."""
        self._generation += 1
        self._state = EmptyState()
        if self.slider is not None:
            self.slider.reset()
        logger.info("Workflow reset")
        return self._state

    def download(self) -> DownloadArtifact:
        """
        Hands the restored image to the presentation layer. No state change.

        Raises:
            InvalidTransitionError: If there is no restored image.
        """
        if not isinstance(self._state, RestoredState):
            raise InvalidTransitionError("There is no restored image to download")
        return DownloadArtifact(filename=self.download_filename, asset=self._state.restored)

    # ==========================================================================
    # Options (never trigger a transition)
    # ==========================================================================

    def set_quality(self, quality: Quality):
        self._options = replace(self._options, quality=Quality(quality))

    def set_colorize(self, colorize: bool):
        self._options = replace(self._options, colorize=bool(colorize))

    def set_style(self, style: ArtStyle):
        self._options = replace(self._options, style=ArtStyle(style))

    def update_options(
        self,
        quality: Optional[Quality] = None,
        colorize: Optional[bool] = None,
        style: Optional[ArtStyle] = None,
    ) -> RestorationOptions:
        if quality is not None:
            self.set_quality(quality)
        if colorize is not None:
            self.set_colorize(colorize)
        if style is not None:
            self.set_style(style)
        return self._options

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _is_stale(self, stamp: int) -> bool:
        if stamp != self._generation:
            logger.info(f"Discarding stale result of restoration #{stamp}")
            return True
        return False
