"""Namespaced store keys."""

from __future__ import annotations

from datetime import datetime, timezone

CHAMPIONSHIP_KEY = "kart:championship:main"
STATISTICS_KEY = "kart:championship:stats"
STATISTICS_TTL = 300  # seconds

_BACKUP_PREFIX = "kart:championship:backup:"


def backup_key(now: datetime | None = None) -> str:
    """Key for a championship backup taken at *now* (UTC)."""
    stamp = (now or datetime.now(timezone.utc)).strftime("%Y%m%dT%H%M%SZ")
    return f"{_BACKUP_PREFIX}{stamp}"
