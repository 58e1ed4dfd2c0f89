"""Session lifecycle rules guarded by management codes."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from match_sessions.domain.errors import (
    ForbiddenError,
    InvalidInputError,
    SessionNotFoundError,
)
from match_sessions.domain.models import Snapshot
from match_sessions.domain.sessions import (
    MatchType,
    SessionRecord,
    SessionType,
    SkillLevel,
)
from match_sessions.services.codes import PRIVATE_CODE_LENGTH, generate_code
from match_sessions.services.store import StoreTransaction

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("title", "date", "time", "maxParticipants", "sessionType")
_PRIVATE_CODE_ATTEMPTS = 5


@dataclass
class SessionService:
    """Application service for creating and managing sessions."""

    transaction: StoreTransaction

    def create_session(self, payload: dict[str, object]) -> SessionRecord:
        """Create a session and return it with its freshly issued codes."""
        missing = [name for name in _REQUIRED_FIELDS if payload.get(name) in (None, "")]
        if missing:
            raise InvalidInputError(f"Missing required fields: {', '.join(missing)}")
        session_type = _parse_enum(SessionType, payload["sessionType"], "sessionType")
        match_type = _parse_enum(
            MatchType, payload.get("matchType") or MatchType.SINGLES, "matchType"
        )
        skill_level = _parse_enum(
            SkillLevel, payload.get("skillLevel") or SkillLevel.ALL, "skillLevel"
        )
        max_participants = _parse_capacity(payload["maxParticipants"])
        if max_participants <= 0:
            raise InvalidInputError("maxParticipants must be a positive integer")

        with self.transaction.transaction() as snapshot:
            session = SessionRecord(
                id=str(uuid4()),
                title=str(payload["title"]),
                description=str(payload.get("description") or ""),
                date=str(payload["date"]),
                time=str(payload["time"]),
                max_participants=max_participants,
                session_type=session_type,
                match_type=match_type,
                skill_level=skill_level,
                management_code=generate_code(),
                private_code=(
                    _unique_private_code(snapshot)
                    if session_type is SessionType.PRIVATE
                    else None
                ),
                created_at=datetime.now(tz=UTC),
            )
            snapshot.sessions.append(session)
        logger.info(
            "Session created",
            extra={"session_id": session.id, "session_type": session_type.value},
        )
        return session

    def get_session(self, identifier: str) -> SessionRecord:
        """Return a session by id, falling back to its private code."""
        return resolve_session(self.transaction.read(), identifier)

    def list_public(self) -> list[SessionRecord]:
        """Return every public session."""
        return public_sessions(self.transaction.read())

    def update_session(
        self, session_id: str, management_code: str | None, payload: dict[str, object]
    ) -> SessionRecord:
        """Apply truthy fields from the payload to a session."""
        with self.transaction.transaction() as snapshot:
            index, current = _find_managed(snapshot, session_id, management_code)
            changes: dict[str, object] = {}
            if payload.get("title"):
                changes["title"] = str(payload["title"])
            if payload.get("description"):
                changes["description"] = str(payload["description"])
            if payload.get("date"):
                changes["date"] = str(payload["date"])
            if payload.get("time"):
                changes["time"] = str(payload["time"])
            if payload.get("maxParticipants"):
                capacity = _parse_capacity(payload["maxParticipants"])
                if capacity <= 0:
                    raise InvalidInputError(
                        "maxParticipants must be a positive integer"
                    )
                changes["max_participants"] = capacity
            if payload.get("matchType"):
                changes["match_type"] = _parse_enum(
                    MatchType, payload["matchType"], "matchType"
                )
            if payload.get("skillLevel"):
                changes["skill_level"] = _parse_enum(
                    SkillLevel, payload["skillLevel"], "skillLevel"
                )
            updated = replace(current, **changes)
            snapshot.sessions[index] = updated
        logger.info(
            "Session updated",
            extra={"session_id": session_id, "fields": sorted(changes)},
        )
        return updated

    def delete_session(self, session_id: str, management_code: str | None) -> None:
        """Delete a session together with all of its attendances."""
        with self.transaction.transaction() as snapshot:
            index, _ = _find_managed(snapshot, session_id, management_code)
            del snapshot.sessions[index]
            remaining = [a for a in snapshot.attendances if a.session_id != session_id]
            removed = len(snapshot.attendances) - len(remaining)
            snapshot.attendances = remaining
        logger.info(
            "Session deleted",
            extra={"session_id": session_id, "attendances_removed": removed},
        )


def public_sessions(snapshot: Snapshot) -> list[SessionRecord]:
    """Return the sessions listed publicly, in storage order."""
    return [s for s in snapshot.sessions if s.session_type is SessionType.PUBLIC]


def resolve_session(snapshot: Snapshot, identifier: str) -> SessionRecord:
    """Find a session by id first, then by private code."""
    session = snapshot.find_session(identifier)
    if session is None:
        session = next(
            (
                s
                for s in snapshot.sessions
                if s.private_code is not None and s.private_code == identifier
            ),
            None,
        )
    if session is None:
        raise SessionNotFoundError
    return session


def _find_managed(
    snapshot: Snapshot, session_id: str, management_code: str | None
) -> tuple[int, SessionRecord]:
    for index, session in enumerate(snapshot.sessions):
        if session.id == session_id:
            break
    else:
        raise SessionNotFoundError
    if management_code != session.management_code:
        logger.warning("Rejected management code", extra={"session_id": session_id})
        raise ForbiddenError("Invalid management code")
    return index, session


def _unique_private_code(snapshot: Snapshot) -> str:
    taken = {s.id for s in snapshot.sessions}
    taken.update(s.private_code for s in snapshot.sessions if s.private_code)
    for _ in range(_PRIVATE_CODE_ATTEMPTS):
        code = generate_code(PRIVATE_CODE_LENGTH)
        if code not in taken:
            return code
    raise RuntimeError("Failed to generate a unique private code")


def _parse_enum(enum_type: type[Enum], value: object, name: str) -> Enum:
    try:
        return enum_type(value)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_type)
        raise InvalidInputError(f"{name} must be one of: {allowed}") from exc


def _parse_capacity(value: object) -> int:
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise InvalidInputError("maxParticipants must be an integer")
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidInputError("maxParticipants must be an integer") from exc
