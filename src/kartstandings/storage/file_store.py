"""JSON-file store used in development when Upstash is not configured."""

from __future__ import annotations

import json
import os
import threading
import time
from collections.abc import Callable, Mapping
from typing import Any

from kartstandings._logging import log_storage_call
from kartstandings.exceptions import StorageError
from kartstandings.storage.base import KeyValueStore

_KEY_PREFIX = "redis:"
_EXPIRY_FIELD = "__expires__"


class FileStore(KeyValueStore):
    """Key-value store persisted to a single JSON file.

    Keys are written as ``redis:<key>``. Expiry times are kept under
    ``__expires__`` and enforced when a key is read.
    """

    def __init__(self, path: str, clock: Callable[[], float] = time.time) -> None:
        self._path = path
        self._clock = clock
        self._lock = threading.Lock()

    @property
    def path(self) -> str:
        return self._path

    def _load(self) -> dict[str, Any]:
        if not os.path.exists(self._path):
            return {}
        try:
            with open(self._path, encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            raise StorageError(f"Failed to read {self._path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageError(f"Unexpected content in {self._path}")
        return data

    def _save(self, data: dict[str, Any]) -> None:
        directory = os.path.dirname(self._path)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            tmp_path = f"{self._path}.tmp"
            with open(tmp_path, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2)
            os.replace(tmp_path, self._path)
        except OSError as exc:
            raise StorageError(f"Failed to write {self._path}: {exc}") from exc

    def _expired(self, data: dict[str, Any], key: str) -> bool:
        expires_at = data.get(_EXPIRY_FIELD, {}).get(key)
        return expires_at is not None and expires_at <= self._clock()

    def _put(self, data: dict[str, Any], key: str, value: Any, ex: int | None) -> None:
        data[_KEY_PREFIX + key] = value
        expiries = data.setdefault(_EXPIRY_FIELD, {})
        if ex:
            expiries[key] = self._clock() + ex
        else:
            expiries.pop(key, None)

    @log_storage_call
    def get(self, key: str) -> Any | None:
        with self._lock:
            data = self._load()
            if self._expired(data, key):
                return None
            return data.get(_KEY_PREFIX + key)

    @log_storage_call
    def set(self, key: str, value: Any, ex: int | None = None) -> None:
        with self._lock:
            data = self._load()
            self._put(data, key, value, ex)
            self._save(data)

    @log_storage_call
    def set_many(self, items: Mapping[str, Any]) -> None:
        with self._lock:
            data = self._load()
            for key, value in items.items():
                self._put(data, key, value, None)
            self._save(data)

    @log_storage_call
    def delete(self, key: str) -> int:
        with self._lock:
            data = self._load()
            existed = _KEY_PREFIX + key in data and not self._expired(data, key)
            data.pop(_KEY_PREFIX + key, None)
            data.get(_EXPIRY_FIELD, {}).pop(key, None)
            self._save(data)
            return 1 if existed else 0

    @log_storage_call
    def exists(self, key: str) -> bool:
        with self._lock:
            data = self._load()
            return _KEY_PREFIX + key in data and not self._expired(data, key)

    @log_storage_call
    def ping(self) -> str:
        return "PONG"
