"""Domain models for the match sessions store."""

from dataclasses import dataclass, field

from match_sessions.domain.attendances import (
    AttendanceRecord,
    attendance_from_dict,
    attendance_to_dict,
)
from match_sessions.domain.sessions import (
    SessionRecord,
    session_from_dict,
    session_to_dict,
)


@dataclass
class Snapshot:
    """Whole-collection view of the store, loaded and saved as one unit."""

    sessions: list[SessionRecord] = field(default_factory=list)
    attendances: list[AttendanceRecord] = field(default_factory=list)

    def find_session(self, session_id: str) -> SessionRecord | None:
        """Return the session with this id, if present."""
        for session in self.sessions:
            if session.id == session_id:
                return session
        return None

    def attendees_of(self, session_id: str) -> list[AttendanceRecord]:
        """Return the attendances registered against a session."""
        return [item for item in self.attendances if item.session_id == session_id]

    def copy(self) -> "Snapshot":
        return Snapshot(sessions=list(self.sessions), attendances=list(self.attendances))


def snapshot_to_dict(snapshot: Snapshot) -> dict[str, list[dict[str, object]]]:
    """Serialize a snapshot into the stored document layout."""
    return {
        "sessions": [session_to_dict(item) for item in snapshot.sessions],
        "attendances": [attendance_to_dict(item) for item in snapshot.attendances],
    }


def snapshot_from_dict(payload: dict[str, object]) -> Snapshot:
    """Build a snapshot from the stored document layout."""
    sessions = payload.get("sessions") or []
    attendances = payload.get("attendances") or []
    if not isinstance(sessions, list) or not isinstance(attendances, list):
        raise ValueError("Store document must hold 'sessions' and 'attendances' lists")
    return Snapshot(
        sessions=[session_from_dict(row) for row in sessions],
        attendances=[attendance_from_dict(row) for row in attendances],
    )
