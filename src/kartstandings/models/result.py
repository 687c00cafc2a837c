"""Race result model: one driver's outcome in one session."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class RaceResult(BaseModel):
    """A single driver's result in one session of an event.

    Wrongly typed fields degrade instead of failing the parse: an unreadable
    position becomes ``None`` and is not scored, numeric ids and names are
    read as text.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str | None = None
    name: str | None = None
    position: int | None = None
    pole_position: bool = False
    fastest_lap: bool = False
    most_consistent: bool = False
    participated: bool = False
    is_dropped: bool = False

    @field_validator("id", "name", mode="before")
    @classmethod
    def _lenient_text(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        logger.warning("Ignoring non-text value %r in race result", value)
        return None

    @field_validator("position", mode="before")
    @classmethod
    def _lenient_position(cls, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str) and value.strip().isdigit():
            return int(value)
        logger.warning("Ignoring invalid position %r in race result", value)
        return None

    @field_validator(
        "pole_position", "fastest_lap", "most_consistent", "participated", "is_dropped",
        mode="before",
    )
    @classmethod
    def _lenient_flag(cls, value: Any) -> Any:
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        if value in (0, 1):
            return bool(value)
        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower() == "true"
        logger.warning("Ignoring invalid flag %r in race result", value)
        return False
