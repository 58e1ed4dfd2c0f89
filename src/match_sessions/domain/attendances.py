"""Domain models for session attendances."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AttendanceRecord:
    """Represents a single player's registration against a session."""

    id: str
    session_id: str
    player_name: str
    email: str | None
    attendance_code: str
    joined_at: datetime


def attendance_to_dict(attendance: AttendanceRecord) -> dict[str, object]:
    """Serialize an attendance using the camelCase document layout."""
    payload: dict[str, object] = {
        "id": attendance.id,
        "sessionId": attendance.session_id,
        "playerName": attendance.player_name,
        "attendanceCode": attendance.attendance_code,
        "joinedAt": attendance.joined_at.isoformat(),
    }
    if attendance.email is not None:
        payload["email"] = attendance.email
    return payload


def attendance_from_dict(row: dict[str, object]) -> AttendanceRecord:
    """Build an attendance from a camelCase document row."""
    email = row.get("email")
    return AttendanceRecord(
        id=str(row["id"]),
        session_id=str(row["sessionId"]),
        player_name=str(row["playerName"]),
        email=str(email) if email is not None else None,
        attendance_code=str(row["attendanceCode"]),
        joined_at=datetime.fromisoformat(str(row["joinedAt"])),
    )
