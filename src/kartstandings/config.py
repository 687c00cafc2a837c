"""Runtime settings read from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_STORAGE_FILE = os.path.join(".redis-mock", "data.json")
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    """Storage settings.

    The Upstash REST store is used only when both ``upstash_url`` and
    ``upstash_token`` are set; otherwise data goes to ``storage_file``.
    """

    upstash_url: str | None = None
    upstash_token: str | None = None
    storage_file: str = DEFAULT_STORAGE_FILE
    timeout: float = DEFAULT_TIMEOUT

    @property
    def use_upstash(self) -> bool:
        return bool(self.upstash_url and self.upstash_token)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from *environ* (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ
    timeout_raw = env.get("KARTSTANDINGS_TIMEOUT")
    try:
        timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
    except ValueError:
        timeout = DEFAULT_TIMEOUT
    return Settings(
        upstash_url=env.get("UPSTASH_REDIS_REST_URL") or None,
        upstash_token=env.get("UPSTASH_REDIS_REST_TOKEN") or None,
        storage_file=env.get("KARTSTANDINGS_STORAGE_FILE") or DEFAULT_STORAGE_FILE,
        timeout=timeout,
    )
