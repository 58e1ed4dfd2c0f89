"""Supabase-backed store for sessions and attendances."""

from dataclasses import dataclass

from supabase import Client

from match_sessions.domain.attendances import attendance_to_dict
from match_sessions.domain.models import Snapshot, snapshot_from_dict
from match_sessions.domain.sessions import session_to_dict
from match_sessions.services.store import Store

_SESSION_COLUMNS = (
    "id, title, description, date, time, maxParticipants, sessionType, "
    "matchType, skillLevel, managementCode, privateCode, createdAt"
)
_ATTENDANCE_COLUMNS = "id, sessionId, playerName, email, attendanceCode, joinedAt"


@dataclass
class SupabaseStore(Store):
    """Supabase implementation of the whole-snapshot store."""

    client: Client

    def load_all(self) -> Snapshot:
        """Return every session and attendance row."""
        sessions = (
            self.client.table("sessions")
            .select(_SESSION_COLUMNS)
            .order("createdAt")
            .execute()
        )
        attendances = (
            self.client.table("attendances")
            .select(_ATTENDANCE_COLUMNS)
            .order("joinedAt")
            .execute()
        )
        return snapshot_from_dict(
            {
                "sessions": sessions.data or [],
                "attendances": attendances.data or [],
            }
        )

    def save_all(self, snapshot: Snapshot) -> None:
        """Upsert the snapshot rows and delete rows no longer present."""
        session_rows = [session_to_dict(s) for s in snapshot.sessions]
        attendance_rows = [attendance_to_dict(a) for a in snapshot.attendances]
        # Bulk upserts require every row to carry the same keys.
        for row in session_rows:
            row.setdefault("privateCode", None)
        for row in attendance_rows:
            row.setdefault("email", None)

        stale_attendances = self._stale_ids(
            "attendances", {row["id"] for row in attendance_rows}
        )
        stale_sessions = self._stale_ids("sessions", {row["id"] for row in session_rows})
        if stale_attendances:
            self.client.table("attendances").delete().in_(
                "id", stale_attendances
            ).execute()
        if stale_sessions:
            self.client.table("sessions").delete().in_("id", stale_sessions).execute()
        if session_rows:
            self.client.table("sessions").upsert(session_rows).execute()
        if attendance_rows:
            self.client.table("attendances").upsert(attendance_rows).execute()

    def _stale_ids(self, table: str, keep: set[object]) -> list[str]:
        response = self.client.table(table).select("id").execute()
        return [
            str(row["id"]) for row in response.data or [] if row["id"] not in keep
        ]
