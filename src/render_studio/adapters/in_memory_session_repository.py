"""Process-local session storage."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

from render_studio.domain.sessions import StudioSession
from render_studio.services.sessions import SessionRepository


@dataclass
class InMemorySessionRepository(SessionRepository):
    """Keeps sessions in memory for the lifetime of the process."""

    sessions: dict[UUID, StudioSession] = field(default_factory=dict)

    def create_session(self) -> StudioSession:
        """Create and store an empty session."""
        session = StudioSession(id=uuid4())
        self.sessions[session.id] = session
        return session

    def get_session(self, session_id: UUID) -> StudioSession | None:
        """Return a stored session, if present."""
        return self.sessions.get(session_id)
