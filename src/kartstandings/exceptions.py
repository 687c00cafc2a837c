"""Custom exceptions for the kart standings library."""

from __future__ import annotations


class KartStandingsError(Exception):
    """Base exception for all kartstandings errors."""


class ChampionshipValidationError(KartStandingsError):
    """Raised when championship data cannot be read into the data model."""


class StorageError(KartStandingsError):
    """Base exception for key-value store failures."""


class StorageConnectionError(StorageError):
    """Raised when the store cannot be reached."""


class StorageTimeoutError(StorageError):
    """Raised when a request to the store times out."""


class StorageAPIError(StorageError):
    """Raised when the store returns an error response."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")
