"""Tests for the session lifecycle."""

import pytest

from match_sessions.domain.errors import (
    ForbiddenError,
    InvalidInputError,
    SessionNotFoundError,
)
from match_sessions.domain.sessions import MatchType, SessionType, SkillLevel
from match_sessions.services import sessions as sessions_module
from match_sessions.services.codes import PRIVATE_CODE_LENGTH
from match_sessions.services.sessions import SessionService
from tests.conftest import InMemoryStore, private_payload, public_payload


def test_create_public_session_applies_defaults(
    session_service: SessionService, store: InMemoryStore
) -> None:
    session = session_service.create_session(public_payload())

    assert session.session_type is SessionType.PUBLIC
    assert session.match_type is MatchType.SINGLES
    assert session.skill_level is SkillLevel.ALL
    assert session.private_code is None
    assert len(session.management_code) == 8
    assert store.snapshot.sessions == [session]


def test_create_private_session_issues_long_private_code(
    session_service: SessionService,
) -> None:
    session = session_service.create_session(private_payload())

    assert session.session_type is SessionType.PRIVATE
    assert session.private_code is not None
    assert len(session.private_code) == 10


def test_create_session_keeps_explicit_match_settings(
    session_service: SessionService,
) -> None:
    session = session_service.create_session(
        public_payload(matchType="tournament", skillLevel="advanced")
    )

    assert session.match_type is MatchType.TOURNAMENT
    assert session.skill_level is SkillLevel.ADVANCED


@pytest.mark.parametrize(
    "overrides",
    [
        {"title": ""},
        {"sessionType": "secret"},
        {"matchType": "mixed"},
        {"maxParticipants": 0},
        {"maxParticipants": "many"},
        {"maxParticipants": 2.7},
    ],
)
def test_create_session_rejects_invalid_input(
    session_service: SessionService, store: InMemoryStore, overrides: dict
) -> None:
    with pytest.raises(InvalidInputError):
        session_service.create_session(public_payload(**overrides))

    assert store.saves == 0


def test_get_session_by_id_and_private_code(session_service: SessionService) -> None:
    session = session_service.create_session(private_payload())

    assert session_service.get_session(session.id) == session
    assert session_service.get_session(session.private_code) == session


def test_get_session_unknown_identifier(session_service: SessionService) -> None:
    session_service.create_session(public_payload())

    with pytest.raises(SessionNotFoundError):
        session_service.get_session("missing")


def test_list_public_excludes_private_sessions(
    session_service: SessionService,
) -> None:
    public = session_service.create_session(public_payload())
    session_service.create_session(private_payload())

    assert session_service.list_public() == [public]


def test_update_merges_only_truthy_fields(session_service: SessionService) -> None:
    session = session_service.create_session(public_payload())

    updated = session_service.update_session(
        session.id,
        session.management_code,
        {"description": "new", "maxParticipants": 0, "title": ""},
    )

    assert updated.description == "new"
    assert updated.title == session.title
    assert updated.date == session.date
    assert updated.time == session.time
    assert updated.max_participants == session.max_participants
    assert session_service.get_session(session.id) == updated


def test_update_never_changes_identity_or_codes(
    session_service: SessionService,
) -> None:
    session = session_service.create_session(private_payload())

    updated = session_service.update_session(
        session.id,
        session.management_code,
        {
            "sessionType": "public",
            "managementCode": "hijacked",
            "privateCode": "hijacked",
            "matchType": "doubles",
            "maxParticipants": 8,
        },
    )

    assert updated.session_type is SessionType.PRIVATE
    assert updated.management_code == session.management_code
    assert updated.private_code == session.private_code
    assert updated.created_at == session.created_at
    assert updated.match_type is MatchType.DOUBLES
    assert updated.max_participants == 8


@pytest.mark.parametrize("code", ["", "wrong-code", None])
def test_update_rejects_wrong_management_code(
    session_service: SessionService, code: str | None
) -> None:
    session = session_service.create_session(public_payload())

    with pytest.raises(ForbiddenError):
        session_service.update_session(session.id, code, {"title": "Nope"})

    assert session_service.get_session(session.id).title == session.title


def test_update_rejects_code_of_another_session(
    session_service: SessionService,
) -> None:
    first = session_service.create_session(public_payload())
    second = session_service.create_session(public_payload())

    with pytest.raises(ForbiddenError):
        session_service.update_session(first.id, second.management_code, {})


def test_update_unknown_session(session_service: SessionService) -> None:
    with pytest.raises(SessionNotFoundError):
        session_service.update_session("missing", "code", {"title": "x"})


def test_update_rejects_unknown_skill_level(session_service: SessionService) -> None:
    session = session_service.create_session(public_payload())

    with pytest.raises(InvalidInputError):
        session_service.update_session(
            session.id, session.management_code, {"skillLevel": "pro"}
        )


def test_delete_session_requires_management_code(
    session_service: SessionService,
) -> None:
    session = session_service.create_session(public_payload())

    with pytest.raises(ForbiddenError):
        session_service.delete_session(session.id, "wrong")
    with pytest.raises(SessionNotFoundError):
        session_service.delete_session("missing", session.management_code)

    session_service.delete_session(session.id, session.management_code)

    with pytest.raises(SessionNotFoundError):
        session_service.get_session(session.id)


def _scripted_private_codes(
    monkeypatch: pytest.MonkeyPatch, private_codes: list[str]
) -> None:
    remaining = list(private_codes)

    def fake_generate_code(length: int = 8) -> str:
        if length == PRIVATE_CODE_LENGTH:
            return remaining.pop(0) if len(remaining) > 1 else remaining[0]
        return "mgmtcode"

    monkeypatch.setattr(sessions_module, "generate_code", fake_generate_code)


def test_create_private_session_regenerates_colliding_code(
    session_service: SessionService, monkeypatch: pytest.MonkeyPatch
) -> None:
    existing = session_service.create_session(private_payload())
    assert existing.private_code is not None
    _scripted_private_codes(monkeypatch, [existing.private_code, "freshcode1"])

    session = session_service.create_session(private_payload())

    assert session.private_code == "freshcode1"
    assert session_service.get_session("freshcode1") == session


def test_create_private_session_gives_up_after_repeated_collisions(
    session_service: SessionService,
    store: InMemoryStore,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    existing = session_service.create_session(private_payload())
    assert existing.private_code is not None
    _scripted_private_codes(monkeypatch, [existing.private_code])

    with pytest.raises(RuntimeError):
        session_service.create_session(private_payload())

    assert store.saves == 1
    assert store.snapshot.sessions == [existing]


def test_update_rejects_fractional_capacity(session_service: SessionService) -> None:
    session = session_service.create_session(public_payload(maxParticipants=4))

    with pytest.raises(InvalidInputError):
        session_service.update_session(
            session.id, session.management_code, {"maxParticipants": 2.7}
        )

    assert session_service.get_session(session.id).max_participants == 4
