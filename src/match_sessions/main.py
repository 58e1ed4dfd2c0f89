"""Command-line entrypoint serving the API with uvicorn."""

import uvicorn

from match_sessions.api.app import create_app
from match_sessions.config import Settings
from match_sessions.containers import build_container


def main() -> None:
    """Build the app from the environment and serve it."""
    settings = Settings()
    app = create_app(build_container(settings))
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    main()
