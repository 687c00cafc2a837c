"""Event model: one race meeting holding one or more sessions."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from kartstandings.models.result import RaceResult

logger = logging.getLogger(__name__)

SessionResults = dict[str, RaceResult]


def _clean_session(race_id: str, value: Any) -> dict[str, Any]:
    """Read a session map, dropping entries that are not result objects."""
    if not isinstance(value, dict):
        logger.warning("Invalid race data for race %s, treating it as empty", race_id)
        return {}
    cleaned = {}
    for driver_id, result in value.items():
        if isinstance(result, (dict, RaceResult)):
            cleaned[driver_id] = result
        else:
            logger.warning("Skipping malformed result for driver %s in race %s", driver_id, race_id)
    return cleaned


class Event(BaseModel):
    """A race meeting.

    Sessions live either in ``races`` (any number, keyed by race id) or in the
    legacy ``race1_results``/``race2_results`` fields. Both may be present.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str | None = None
    name: str | None = None
    date: str | None = None
    races: dict[str, SessionResults] | None = None
    race1_results: SessionResults | None = Field(default=None, alias="race1Results")
    race2_results: SessionResults | None = Field(default=None, alias="race2Results")

    @field_validator("races", mode="before")
    @classmethod
    def _lenient_races(cls, value: Any) -> Any:
        if value is None:
            return None
        if not isinstance(value, dict):
            logger.warning("Ignoring races field of type %s", type(value).__name__)
            return None
        return {race_id: _clean_session(race_id, session) for race_id, session in value.items()}

    @field_validator("race1_results", "race2_results", mode="before")
    @classmethod
    def _lenient_legacy(cls, value: Any) -> Any:
        if value is None:
            return None
        if not isinstance(value, dict):
            logger.warning("Ignoring legacy results field of type %s", type(value).__name__)
            return None
        return _clean_session("legacy", value)
