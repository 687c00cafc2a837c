"""Storage layer: key-value stores and the championship repository."""

from __future__ import annotations

from kartstandings.config import Settings, load_settings

from .base import KeyValueStore
from .file_store import FileStore
from .keys import CHAMPIONSHIP_KEY, STATISTICS_KEY, backup_key
from .repository import ChampionshipRepository, validate_championship
from .upstash import UpstashStore


def get_store(settings: Settings | None = None) -> KeyValueStore:
    """Return the store selected by *settings*."""
    settings = settings or load_settings()
    if settings.use_upstash:
        return UpstashStore(
            url=settings.upstash_url,  # type: ignore[arg-type]
            token=settings.upstash_token,  # type: ignore[arg-type]
            timeout=settings.timeout,
        )
    return FileStore(settings.storage_file)


def get_repository(settings: Settings | None = None) -> ChampionshipRepository:
    """Return a championship repository for the configured store."""
    return ChampionshipRepository(get_store(settings))


__all__ = [
    "CHAMPIONSHIP_KEY",
    "ChampionshipRepository",
    "FileStore",
    "KeyValueStore",
    "STATISTICS_KEY",
    "UpstashStore",
    "backup_key",
    "get_repository",
    "get_store",
    "validate_championship",
]
