"""Session and attendance REST endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from match_sessions.api.schemas import (
    AttendRequest,
    SessionCreateRequest,
    SessionUpdateRequest,
)
from match_sessions.domain.attendances import AttendanceRecord, attendance_to_dict
from match_sessions.domain.errors import ForbiddenError
from match_sessions.domain.sessions import SessionRecord, session_to_dict

if TYPE_CHECKING:
    from match_sessions.containers import AppContainer

router = APIRouter(prefix="/api/sessions", tags=["sessions"])

_SESSION_SECRETS = ("managementCode", "privateCode")
_ATTENDANCE_SECRETS = ("attendanceCode",)


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("")
async def list_sessions(request: Request) -> list[dict[str, object]]:
    """Return all public sessions."""
    container = _container(request)
    expose = container.settings.expose_secrets
    return [
        _session_view(session, expose)
        for session in container.query_service.public_sessions()
    ]


@router.get("/{identifier}")
async def get_session(identifier: str, request: Request) -> dict[str, object]:
    """Return a session by id or private code, with its attendees."""
    container = _container(request)
    expose = container.settings.expose_secrets
    detail = container.query_service.session_with_attendees(identifier)
    payload = _session_view(detail.session, expose)
    payload["attendees"] = [_attendance_view(a, expose) for a in detail.attendees]
    return payload


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_session(
    body: SessionCreateRequest, request: Request
) -> dict[str, object]:
    """Create a session and return it with its management code."""
    session = _container(request).session_service.create_session(body.to_payload())
    return session_to_dict(session)


@router.put("/{session_id}")
async def update_session(
    session_id: str, body: SessionUpdateRequest, request: Request
) -> dict[str, object]:
    """Update a session when the management code matches."""
    container = _container(request)
    payload = body.to_payload()
    payload.pop("managementCode", None)
    session = container.session_service.update_session(
        session_id, body.management_code, payload
    )
    return _session_view(session, container.settings.expose_secrets)


@router.delete("/{session_id}")
async def delete_session(
    session_id: str, request: Request, managementCode: str | None = None  # noqa: N803
) -> dict[str, str]:
    """Delete a session and all of its attendances."""
    _container(request).session_service.delete_session(session_id, managementCode)
    return {"message": "Session deleted successfully"}


@router.post("/{session_id}/attend", status_code=status.HTTP_201_CREATED)
async def attend_session(
    session_id: str, body: AttendRequest, request: Request
) -> dict[str, object]:
    """Join a session and return the attendance with its removal code."""
    attendance = _container(request).attendance_service.join(
        session_id, body.player_name, body.email
    )
    return attendance_to_dict(attendance)


@router.delete("/{session_id}/attend/{attendance_id}")
async def remove_attendance(
    session_id: str,
    attendance_id: str,
    request: Request,
    attendanceCode: str | None = None,  # noqa: N803
    managementCode: str | None = None,  # noqa: N803
) -> dict[str, str]:
    """Remove an attendance using the attendee's or the organizer's code.

    When both codes are sent, a matching management code still authorizes the
    removal if the attendance code is rejected.
    """
    service = _container(request).attendance_service
    if attendanceCode is None:
        service.leave(
            session_id, attendance_id, managementCode, is_management_code=True
        )
    elif managementCode is None:
        service.leave(session_id, attendance_id, attendanceCode)
    else:
        try:
            service.leave(session_id, attendance_id, attendanceCode)
        except ForbiddenError:
            service.leave(
                session_id, attendance_id, managementCode, is_management_code=True
            )
    return {"message": "Attendance removed successfully"}


@router.get("/{session_id}/attendees")
async def list_attendees(session_id: str, request: Request) -> list[dict[str, object]]:
    """Return the attendees of a session."""
    container = _container(request)
    expose = container.settings.expose_secrets
    return [
        _attendance_view(attendance, expose)
        for attendance in container.query_service.attendees_of(session_id)
    ]


def _session_view(session: SessionRecord, expose_secrets: bool) -> dict[str, object]:
    payload = session_to_dict(session)
    if not expose_secrets:
        for key in _SESSION_SECRETS:
            payload.pop(key, None)
    return payload


def _attendance_view(
    attendance: AttendanceRecord, expose_secrets: bool
) -> dict[str, object]:
    payload = attendance_to_dict(attendance)
    if not expose_secrets:
        for key in _ATTENDANCE_SECRETS:
            payload.pop(key, None)
    return payload
