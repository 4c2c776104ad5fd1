import uuid
from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..restoration.request import RestorationRequest
from ..services.session import RestorationSession
from ..workflow.controller import FileReader


class SessionRepository(ABC):
    """
    Defines how the application accesses restoration sessions.
    Sessions are never persisted across process restarts.
    """

    @abstractmethod
    def create(self) -> RestorationSession:
        """Creates a new empty session with a unique ID."""
        pass

    @abstractmethod
    def get(self, session_id: str) -> Optional[RestorationSession]:
        """Retrieves a session by ID."""
        pass

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        """Deletes a session. Returns True if found and deleted."""
        pass


class InMemorySessionRepository(SessionRepository):
    """
    Keeps live sessions in a dictionary for the lifetime of the process.
    """

    def __init__(
        self,
        restorer: RestorationRequest,
        file_reader: Optional[FileReader] = None,
        max_upload_bytes: Optional[int] = None,
        download_filename: Optional[str] = None,
    ):
        self.restorer = restorer
        self.file_reader = file_reader
        self.max_upload_bytes = max_upload_bytes
        self.download_filename = download_filename
        self._store: Dict[str, RestorationSession] = {}

    def create(self) -> RestorationSession:
        new_id = str(uuid.uuid4())
        session = RestorationSession(
            session_id=new_id,
            restorer=self.restorer,
            file_reader=self.file_reader,
            max_upload_bytes=self.max_upload_bytes,
            download_filename=self.download_filename,
        )
        self._store[new_id] = session
        return session

    def get(self, session_id: str) -> Optional[RestorationSession]:
        return self._store.get(session_id)

    def delete(self, session_id: str) -> bool:
        session = self._store.pop(session_id, None)
        if session is None:
            return False
        session.close()
        return True
