"""Championship repository on top of a key-value store."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from kartstandings._logging import log_storage_call
from kartstandings.exceptions import ChampionshipValidationError, StorageError
from kartstandings.models.championship import Championship
from kartstandings.models.statistics import RaceStatistics
from kartstandings.sample_data import create_empty_championship
from kartstandings.statistics import race_statistics
from kartstandings.storage.base import KeyValueStore
from kartstandings.storage.keys import CHAMPIONSHIP_KEY, STATISTICS_KEY, STATISTICS_TTL, backup_key

logger = logging.getLogger(__name__)


def validate_championship(data: Any) -> Championship:
    """Read raw JSON data into a :class:`Championship`."""
    try:
        return Championship.model_validate(data)
    except ValidationError as exc:
        raise ChampionshipValidationError(f"Failed to validate championship: {exc}") from exc


def _dump(championship: Championship) -> dict[str, Any]:
    return championship.model_dump(mode="json", by_alias=True, exclude_none=True)


class ChampionshipRepository:
    """Loads and saves the championship snapshot.

    Usage:
        repo = ChampionshipRepository(FileStore(".redis-mock/data.json"))
        championship = repo.load_or_default()
        repo.save(toggle_drop(championship, "marco-rossi", "gp-monza-2024", "race1"))
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    @property
    def store(self) -> KeyValueStore:
        return self._store

    def close(self) -> None:
        self._store.close()

    @log_storage_call
    def load(self) -> Championship | None:
        """Stored championship, or None when nothing has been saved."""
        data = self._store.get(CHAMPIONSHIP_KEY)
        if data is None:
            return None
        return validate_championship(data)

    def load_or_default(self) -> Championship:
        """Stored championship, or a fresh empty one."""
        championship = self.load()
        if championship is None:
            logger.info("No championship found, returning empty championship")
            return create_empty_championship()
        return championship

    @log_storage_call
    def save(self, championship: Championship) -> None:
        self._store.set(CHAMPIONSHIP_KEY, _dump(championship))

    @log_storage_call
    def backup(self, key: str, championship: Championship) -> None:
        self._store.set(key, _dump(championship))

    @log_storage_call
    def atomic_update(self, championship: Championship, backup: str | bool | None = None) -> str | None:
        """Save *championship*, writing a backup copy in the same operation.

        Pass a key to back up under that key, or ``True`` for a timestamped
        backup key. Returns the backup key used, if any.
        """
        key = backup_key() if backup is True else backup or None
        payload = _dump(championship)
        items = {key: payload, CHAMPIONSHIP_KEY: payload} if key else {CHAMPIONSHIP_KEY: payload}
        self._store.set_many(items)
        return key

    def health_check(self) -> bool:
        """True when the store answers a ping."""
        try:
            self._store.ping()
        except StorageError as exc:
            logger.error("Store health check failed: %s", exc)
            return False
        return True

    def statistics(self) -> RaceStatistics:
        """Compute statistics for the stored championship and cache them.

        Caching is best effort: a store failure while caching is logged and
        the computed statistics are still returned.
        """
        championship = self.load()
        if championship is None:
            return RaceStatistics()
        stats = race_statistics(championship)
        try:
            self._store.set(STATISTICS_KEY, stats.model_dump(mode="json", by_alias=True), ex=STATISTICS_TTL)
        except StorageError as exc:
            logger.warning("Failed to cache statistics: %s", exc)
        return stats
