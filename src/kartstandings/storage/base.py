"""Abstract key-value store used by the championship repository."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class KeyValueStore(ABC):
    """JSON-valued key-value store with optional per-key expiry."""

    @abstractmethod
    def get(self, key: str) -> Any | None: ...

    @abstractmethod
    def set(self, key: str, value: Any, ex: int | None = None) -> None: ...

    @abstractmethod
    def set_many(self, items: Mapping[str, Any]) -> None:
        """Write all *items* together; either every key is written or none."""

    @abstractmethod
    def delete(self, key: str) -> int: ...

    @abstractmethod
    def exists(self, key: str) -> bool: ...

    @abstractmethod
    def ping(self) -> str: ...

    def close(self) -> None:
        """Release any held resources."""
