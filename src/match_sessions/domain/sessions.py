"""Domain models for match sessions."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class SessionType(str, Enum):
    """Visibility of a session."""

    PUBLIC = "public"
    PRIVATE = "private"


class MatchType(str, Enum):
    """Format of the matches played in a session."""

    SINGLES = "singles"
    DOUBLES = "doubles"
    TOURNAMENT = "tournament"


class SkillLevel(str, Enum):
    """Skill level a session is aimed at."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ALL = "all"


@dataclass(frozen=True)
class SessionRecord:
    """Represents a persisted match session, secrets included."""

    id: str
    title: str
    description: str
    date: str
    time: str
    max_participants: int
    session_type: SessionType
    match_type: MatchType
    skill_level: SkillLevel
    management_code: str
    private_code: str | None
    created_at: datetime


def session_to_dict(session: SessionRecord) -> dict[str, object]:
    """Serialize a session using the camelCase document layout."""
    payload: dict[str, object] = {
        "id": session.id,
        "title": session.title,
        "description": session.description,
        "date": session.date,
        "time": session.time,
        "maxParticipants": session.max_participants,
        "sessionType": session.session_type.value,
        "matchType": session.match_type.value,
        "skillLevel": session.skill_level.value,
        "managementCode": session.management_code,
        "createdAt": session.created_at.isoformat(),
    }
    if session.private_code is not None:
        payload["privateCode"] = session.private_code
    return payload


def session_from_dict(row: dict[str, object]) -> SessionRecord:
    """Build a session from a camelCase document row."""
    return SessionRecord(
        id=str(row["id"]),
        title=str(row.get("title") or ""),
        description=str(row.get("description") or ""),
        date=str(row.get("date") or ""),
        time=str(row.get("time") or ""),
        max_participants=int(row["maxParticipants"]),
        session_type=SessionType(row["sessionType"]),
        match_type=MatchType(row.get("matchType") or MatchType.SINGLES),
        skill_level=SkillLevel(row.get("skillLevel") or SkillLevel.ALL),
        management_code=str(row["managementCode"]),
        private_code=str(row["privateCode"]) if row.get("privateCode") else None,
        created_at=datetime.fromisoformat(str(row["createdAt"])),
    )
