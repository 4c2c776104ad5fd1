"""
Restoration Session - Application Orchestration Layer

A RestorationSession bundles everything one client works with: the
workflow state machine, the comparison slider and the event target its
drag listeners are attached to. The HTTP layer forwards intents to it and
reads state back; it holds no rendering logic.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from ..comparison.events import PRESS_EVENTS, ContainerRect, InputEvent, ListenerRegistry
from ..comparison.slider import ComparisonSliderController, SliderSession
from ..restoration.request import RestorationRequest
from ..state.models import RestoredState
from ..workflow.controller import FileReader, WorkflowController

logger = logging.getLogger(__name__)


class RestorationSession:
    def __init__(
        self,
        session_id: str,
        restorer: RestorationRequest,
        file_reader: Optional[FileReader] = None,
        max_upload_bytes: Optional[int] = None,
        download_filename: Optional[str] = None,
    ):
        self.session_id = session_id
        self.created_at = datetime.now(timezone.utc)

        # Plays the role of the browser window for global drag listeners.
        self.events = ListenerRegistry()
        self.container: Optional[ContainerRect] = None
        self.slider = ComparisonSliderController(self.events, lambda: self.container)

        workflow_kwargs = {}
        if max_upload_bytes is not None:
            workflow_kwargs["max_upload_bytes"] = max_upload_bytes
        if download_filename is not None:
            workflow_kwargs["download_filename"] = download_filename
        self.workflow = WorkflowController(
            restorer=restorer,
            file_reader=file_reader,
            slider=self.slider,
            **workflow_kwargs,
        )

    def handle_input(
        self,
        event_type: str,
        event: InputEvent,
        container: Optional[ContainerRect] = None,
    ) -> SliderSession:
        """
        Routes one forwarded input event. Presses start a drag session (the
        handle only exists once there is a restored image); everything else
        goes to whichever global listeners are currently attached.
        """
        if container is not None:
            self.container = container

        if event_type in PRESS_EVENTS:
            if isinstance(self.workflow.state, RestoredState):
                self.slider.begin_drag()
            else:
                logger.debug(f"Ignoring {event_type}: no comparison handle without a result")
        else:
            self.events.dispatch(event_type, event)
        return self.slider.snapshot()

    def close(self):
        """Teardown: no drag listener may outlive the session."""
        self.slider.close()
