"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from match_sessions.api.errors import install_error_handlers
from match_sessions.api.sessions import router as sessions_router
from match_sessions.app_logging import configure_logging
from match_sessions.config import parse_cors_origins
from match_sessions.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Match sessions API starting",
            extra={"storage_backend": container.settings.storage_backend},
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Match Sessions", lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)
    app.include_router(sessions_router)

    @app.get("/", response_class=HTMLResponse)
    async def index() -> HTMLResponse:
        """Plain welcome page."""
        return HTMLResponse("<h1>welcome to backend</h1>")

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
