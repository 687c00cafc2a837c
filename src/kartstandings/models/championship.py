"""Championship snapshot model."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from kartstandings.models.event import Event

logger = logging.getLogger(__name__)


class Championship(BaseModel):
    """Championship snapshot as stored under the championship key.

    ``drivers`` and ``leaders`` are carried through as raw objects; the
    engine discovers drivers from results and never reads leader data.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str | None = None
    name: str | None = None
    season: str | None = None
    drivers: list[dict[str, Any]] = []
    events: list[Event] = []
    leaders: list[dict[str, Any]] = []
    created_at: str | None = None
    updated_at: str | None = None

    @field_validator("events", mode="before")
    @classmethod
    def _skip_invalid_events(cls, value: Any) -> Any:
        if value is None:
            return []
        if not isinstance(value, list):
            logger.warning("Ignoring events field of type %s", type(value).__name__)
            return []
        events = []
        for index, event in enumerate(value):
            if isinstance(event, (dict, Event)):
                events.append(event)
            else:
                logger.warning("Invalid event data at index %d", index)
        return events

    @field_validator("drivers", "leaders", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value
