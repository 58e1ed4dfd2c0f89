"""Pydantic models for session API request bodies."""

from pydantic import BaseModel, Field


class _CamelModel(BaseModel):
    def to_payload(self) -> dict[str, object]:
        """Return the body as a camelCase mapping for the services."""
        return self.model_dump(by_alias=True, exclude_none=True)


class SessionCreateRequest(_CamelModel):
    """Body for creating a session."""

    title: str
    description: str | None = None
    date: str
    time: str
    max_participants: int = Field(alias="maxParticipants")
    session_type: str = Field(alias="sessionType")
    match_type: str | None = Field(default=None, alias="matchType")
    skill_level: str | None = Field(default=None, alias="skillLevel")


class SessionUpdateRequest(_CamelModel):
    """Body for updating a session; falsy fields keep their stored value."""

    management_code: str | None = Field(default=None, alias="managementCode")
    title: str | None = None
    description: str | None = None
    date: str | None = None
    time: str | None = None
    max_participants: int | None = Field(default=None, alias="maxParticipants")
    match_type: str | None = Field(default=None, alias="matchType")
    skill_level: str | None = Field(default=None, alias="skillLevel")


class AttendRequest(_CamelModel):
    """Body for joining a session."""

    player_name: str | None = Field(default=None, alias="playerName")
    email: str | None = None
