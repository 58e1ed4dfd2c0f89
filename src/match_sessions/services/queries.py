"""Read-only views shared by the detail and management screens."""

from dataclasses import dataclass

from match_sessions.domain.attendances import AttendanceRecord
from match_sessions.domain.sessions import SessionRecord
from match_sessions.services.sessions import public_sessions, resolve_session
from match_sessions.services.store import StoreTransaction


@dataclass(frozen=True)
class SessionDetail:
    """A session joined with its current attendees."""

    session: SessionRecord
    attendees: list[AttendanceRecord]


@dataclass
class QueryService:
    """Projections over a single consistent store snapshot."""

    transaction: StoreTransaction

    def public_sessions(self) -> list[SessionRecord]:
        """Return every public session."""
        return public_sessions(self.transaction.read())

    def session_with_attendees(self, identifier: str) -> SessionDetail:
        """Resolve a session by id or private code and attach its attendees."""
        snapshot = self.transaction.read()
        session = resolve_session(snapshot, identifier)
        return SessionDetail(session=session, attendees=snapshot.attendees_of(session.id))

    def attendees_of(self, session_id: str) -> list[AttendanceRecord]:
        """Return every attendance registered against a session."""
        return self.transaction.read().attendees_of(session_id)
