"""Map engine rejections onto HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from match_sessions.domain.errors import (
    AttendanceNotFoundError,
    ForbiddenError,
    InvalidInputError,
    MatchSessionsError,
    SessionFullError,
    SessionNotFoundError,
)

_UNPROCESSABLE = 422

_STATUS_CODES: dict[type[MatchSessionsError], int] = {
    SessionNotFoundError: status.HTTP_404_NOT_FOUND,
    AttendanceNotFoundError: status.HTTP_404_NOT_FOUND,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    SessionFullError: status.HTTP_400_BAD_REQUEST,
    InvalidInputError: _UNPROCESSABLE,
}


def install_error_handlers(app: FastAPI) -> None:
    """Register handlers returning ``{"error": ...}`` bodies."""

    @app.exception_handler(MatchSessionsError)
    async def engine_error_handler(
        request: Request, exc: MatchSessionsError
    ) -> JSONResponse:
        status_code = _STATUS_CODES.get(type(exc), status.HTTP_400_BAD_REQUEST)
        return JSONResponse(status_code=status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=_UNPROCESSABLE,
            content={"error": "Invalid request", "details": jsonable_errors(exc)},
        )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, object]]:
    """Reduce pydantic error entries to location and message."""
    return [
        {"loc": list(error.get("loc", ())), "msg": str(error.get("msg", ""))}
        for error in exc.errors()
    ]
