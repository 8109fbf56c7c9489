import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional, Dict

from pydantic import BaseModel, ConfigDict, Field

from ..execution.engine import StepRunner
from ..matching.similarity import STEP_SIMILARITY_THRESHOLD


class TroubleshootingSession(BaseModel):
    """
    One user's troubleshooting session: an id and the runner it owns.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    session_id: str
    runner: StepRunner
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class SessionRepository(ABC):
    """
    Defines how the application accesses sessions.
    This allows us change how sessions are held later without changing
    the StepRunner code.
    """

    @abstractmethod
    def create(self) -> TroubleshootingSession:
        """Creates a new idle session with a unique ID."""
        pass

    @abstractmethod
    def get(self, session_id: str) -> Optional[TroubleshootingSession]:
        """Retrieves a session by ID."""
        pass

    @abstractmethod
    def save(self, session: TroubleshootingSession):
        """Stores the session after an operation."""
        pass

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        """Deletes a session. Returns True if found and deleted."""
        pass


class InMemorySessionRepository(SessionRepository):
    """
    Uses an in-memory dictionary for session storage.
    Sessions live only as long as the process.
    """

    def __init__(self, similarity_threshold: float = STEP_SIMILARITY_THRESHOLD):
        self._store: Dict[str, TroubleshootingSession] = {}
        self.similarity_threshold = similarity_threshold

    def create(self) -> TroubleshootingSession:
        new_id = str(uuid.uuid4())
        session = TroubleshootingSession(
            session_id=new_id,
            runner=StepRunner(similarity_threshold=self.similarity_threshold),
        )
        self._store[new_id] = session
        return session

    def get(self, session_id: str) -> Optional[TroubleshootingSession]:
        return self._store.get(session_id)

    def save(self, session: TroubleshootingSession):
        session.updated_at = datetime.now(timezone.utc)
        self._store[session.session_id] = session

    def delete(self, session_id: str) -> bool:
        if session_id in self._store:
            del self._store[session_id]
            return True
        return False
