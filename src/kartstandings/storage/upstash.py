"""Upstash Redis store for production deployments."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from kartstandings._logging import log_storage_call
from kartstandings.config import DEFAULT_TIMEOUT
from kartstandings.storage._http import UpstashTransport
from kartstandings.storage.base import KeyValueStore


def _encode(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


def _decode(raw: Any) -> Any:
    """Values are stored JSON-encoded; anything else is returned as is."""
    if not isinstance(raw, str):
        return raw
    try:
        return json.loads(raw)
    except ValueError:
        return raw


class UpstashStore(KeyValueStore):
    """Key-value store backed by the Upstash Redis REST API.

    Usage:
        with UpstashStore(url, token) as store:
            store.set("kart:championship:main", data)
    """

    def __init__(
        self,
        url: str,
        token: str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = UpstashTransport(url=url, token=token, timeout=timeout)

    def __enter__(self) -> UpstashStore:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_storage_call
    def get(self, key: str) -> Any | None:
        return _decode(self._transport.command("GET", key))

    @log_storage_call
    def set(self, key: str, value: Any, ex: int | None = None) -> None:
        if ex:
            self._transport.command("SET", key, _encode(value), "EX", str(ex))
        else:
            self._transport.command("SET", key, _encode(value))

    @log_storage_call
    def set_many(self, items: Mapping[str, Any]) -> None:
        self._transport.transaction([["SET", key, _encode(value)] for key, value in items.items()])

    @log_storage_call
    def delete(self, key: str) -> int:
        return int(self._transport.command("DEL", key))

    @log_storage_call
    def exists(self, key: str) -> bool:
        return int(self._transport.command("EXISTS", key)) > 0

    @log_storage_call
    def ping(self) -> str:
        return str(self._transport.command("PING"))
