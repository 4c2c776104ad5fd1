import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, File, HTTPException, UploadFile, status
from fastapi.responses import Response

from ..comparison.events import ContainerRect, MouseInput, TouchInput, TouchPoint
from ..config import get_settings
from ..domain.models import RestorationOptions
from ..repositories.session import SessionRepository
from ..services.exceptions import InvalidTransitionError, PayloadTooLarge
from ..services.session import RestorationSession
from ..state.models import ProcessingState
from .dependencies import get_session_repository
from .schemas import (
    ComparisonEvent,
    CreateSessionResponse,
    ErrorRead,
    OptionsRead,
    OptionsUpdate,
    SessionRead,
    SliderRead,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=get_settings().LOG_LEVEL)
    yield


app = FastAPI(title="IMG Restore", lifespan=lifespan)


# --- Helpers ---

def _get_session(session_id: str, repo: SessionRepository) -> RestorationSession:
    session = repo.get(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def _options_dto(options: RestorationOptions) -> OptionsRead:
    return OptionsRead(quality=options.quality, colorize=options.colorize, style=options.style)


def _session_dto(session: RestorationSession) -> SessionRead:
    # Explicitly map the workflow state onto the public API shape.
    workflow = session.workflow
    state = workflow.state
    slider = session.slider.snapshot()
    error = getattr(state, "error", None)

    return SessionRead(
        session_id=session.session_id,
        status=state.status,
        options=_options_dto(workflow.options),
        processing_options=_options_dto(state.options) if isinstance(state, ProcessingState) else None,
        original=workflow.original.to_data_uri() if workflow.original else None,
        restored=workflow.restored.to_data_uri() if workflow.restored else None,
        error=ErrorRead(kind=error.kind, message=error.message) if error else None,
        slider=SliderRead(active=slider.active, position=slider.position),
        created_at=session.created_at,
    )


# --- Endpoints ---

@app.post(
    "/sessions",
    response_model=CreateSessionResponse,
    status_code=status.HTTP_201_CREATED
)
def create_session(repo: SessionRepository = Depends(get_session_repository)):
    """Starts a new empty session."""
    session = repo.create()
    return CreateSessionResponse(session_id=session.session_id)


@app.get("/sessions/{session_id}", response_model=SessionRead)
def get_session(session_id: str, repo: SessionRepository = Depends(get_session_repository)):
    return _session_dto(_get_session(session_id, repo))


@app.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_session(session_id: str, repo: SessionRepository = Depends(get_session_repository)):
    """
    Deletes a session and releases any drag listeners it still holds.
    """
    if not repo.delete(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.post("/sessions/{session_id}/image", response_model=SessionRead)
async def upload_image(
    session_id: str,
    file: UploadFile = File(...),
    repo: SessionRepository = Depends(get_session_repository)
):
    """Accepts the file picker and drag-and-drop uploads alike."""
    session = _get_session(session_id, repo)
    try:
        await session.workflow.upload_file(file)
    except PayloadTooLarge as e:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=e.message)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _session_dto(session)


@app.patch("/sessions/{session_id}/options", response_model=OptionsRead)
def update_options(
    session_id: str,
    update: OptionsUpdate,
    repo: SessionRepository = Depends(get_session_repository)
):
    session = _get_session(session_id, repo)
    options = session.workflow.update_options(
        quality=update.quality,
        colorize=update.colorize,
        style=update.style,
    )
    return _options_dto(options)


@app.post("/sessions/{session_id}/restorations", response_model=SessionRead)
async def start_restoration(session_id: str, repo: SessionRepository = Depends(get_session_repository)):
    """
    Runs one restoration and returns the state it settled in. A request made
    while another is still running returns the PROCESSING state unchanged.
    """
    session = _get_session(session_id, repo)
    try:
        await session.workflow.start_restoration()
    except InvalidTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return _session_dto(session)


@app.post("/sessions/{session_id}/reset", response_model=SessionRead)
def reset_session(session_id: str, repo: SessionRepository = Depends(get_session_repository)):
    session = _get_session(session_id, repo)
    session.workflow.reset()
    return _session_dto(session)


@app.get("/sessions/{session_id}/download")
def download_result(session_id: str, repo: SessionRepository = Depends(get_session_repository)):
    session = _get_session(session_id, repo)
    try:
        artifact = session.workflow.download()
    except InvalidTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return Response(
        content=artifact.asset.data,
        media_type=artifact.asset.mime_type,
        headers={"Content-Disposition": f'attachment; filename="{artifact.filename}"'},
    )


@app.post("/sessions/{session_id}/comparison/events", response_model=SliderRead)
def comparison_event(
    session_id: str,
    event: ComparisonEvent,
    repo: SessionRepository = Depends(get_session_repository)
):
    """Forwards one pointer or touch event to the comparison slider."""
    session = _get_session(session_id, repo)

    if event.type.startswith("touch"):
        input_event = TouchInput(touches=[TouchPoint(client_x=x) for x in event.touches])
    else:
        if event.client_x is None and event.type == "mousemove":
            raise HTTPException(status_code=422, detail="mousemove requires client_x")
        input_event = MouseInput(client_x=event.client_x or 0.0)

    container = None
    if event.container is not None:
        container = ContainerRect(left=event.container.left, width=event.container.width)

    snapshot = session.handle_input(event.type, input_event, container)
    return SliderRead(active=snapshot.active, position=snapshot.position)
