"""ASGI entrypoint for the match sessions API."""

from match_sessions.api.app import create_app
from match_sessions.containers import build_container

app = create_app(build_container())
