"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from match_sessions.adapters.json_file_store import JsonFileStore
from match_sessions.adapters.supabase_store import SupabaseStore
from match_sessions.config import Settings
from match_sessions.services.attendances import AttendanceService
from match_sessions.services.queries import QueryService
from match_sessions.services.sessions import SessionService
from match_sessions.services.store import Store, StoreTransaction


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_service: SessionService
    attendance_service: AttendanceService
    query_service: QueryService
    close_resources: Callable[[], Awaitable[None]]


def build_store(settings: Settings) -> Store:
    """Create the store selected by the settings."""
    if settings.storage_backend == "json":
        return JsonFileStore(Path(settings.data_file))
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "SUPABASE_URL and SUPABASE_SERVICE_KEY are required for supabase storage"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseStore(client)
    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")


def build_services(settings: Settings, store: Store) -> AppContainer:
    """Wire services around a single shared store transaction."""
    transaction = StoreTransaction(store)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        session_service=SessionService(transaction),
        attendance_service=AttendanceService(transaction),
        query_service=QueryService(transaction),
        close_resources=close_resources,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    return build_services(resolved_settings, build_store(resolved_settings))
