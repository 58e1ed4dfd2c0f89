"""Attendance lifecycle: joining, leaving and capacity enforcement."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from match_sessions.domain.attendances import AttendanceRecord
from match_sessions.domain.errors import (
    AttendanceNotFoundError,
    ForbiddenError,
    InvalidInputError,
    SessionFullError,
    SessionNotFoundError,
)
from match_sessions.services.codes import generate_code
from match_sessions.services.store import StoreTransaction

logger = logging.getLogger(__name__)


@dataclass
class AttendanceService:
    """Application service for session attendance."""

    transaction: StoreTransaction

    def join(
        self, session_id: str, player_name: str | None, email: str | None = None
    ) -> AttendanceRecord:
        """Register a player against a session if it has room left."""
        if not player_name or not player_name.strip():
            raise InvalidInputError("playerName is required")
        with self.transaction.transaction() as snapshot:
            session = snapshot.find_session(session_id)
            if session is None:
                raise SessionNotFoundError
            if len(snapshot.attendees_of(session_id)) >= session.max_participants:
                raise SessionFullError
            attendance = AttendanceRecord(
                id=str(uuid4()),
                session_id=session_id,
                player_name=player_name,
                email=email,
                attendance_code=generate_code(),
                joined_at=datetime.now(tz=UTC),
            )
            snapshot.attendances.append(attendance)
        logger.info(
            "Player joined session",
            extra={"session_id": session_id, "attendance_id": attendance.id},
        )
        return attendance

    def leave(
        self,
        session_id: str,
        attendance_id: str,
        code: str | None,
        is_management_code: bool = False,
    ) -> None:
        """Remove an attendance using its own code or the session's management code.

        Either code is accepted regardless of ``is_management_code``; the flag
        only labels who performed the removal.
        """
        with self.transaction.transaction() as snapshot:
            index = next(
                (
                    i
                    for i, item in enumerate(snapshot.attendances)
                    if item.id == attendance_id and item.session_id == session_id
                ),
                None,
            )
            if index is None:
                raise AttendanceNotFoundError
            attendance = snapshot.attendances[index]
            session = snapshot.find_session(session_id)
            own_code = attendance.attendance_code == code
            organizer_code = session is not None and session.management_code == code
            if not own_code and not organizer_code:
                logger.warning(
                    "Rejected attendance removal",
                    extra={"session_id": session_id, "attendance_id": attendance_id},
                )
                raise ForbiddenError
            del snapshot.attendances[index]
        logger.info(
            "Attendance removed",
            extra={
                "session_id": session_id,
                "attendance_id": attendance_id,
                "removed_by": "organizer" if is_management_code else "attendee",
            },
        )

    def list_attendees(self, session_id: str) -> list[AttendanceRecord]:
        """Return every attendance registered against a session."""
        return self.transaction.read().attendees_of(session_id)
