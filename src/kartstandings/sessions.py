"""Uniform view over an event's new-format and legacy sessions.

Events store sessions either in the ``races`` map or in the two fixed
``race1_results``/``race2_results`` fields. :func:`normalize_sessions`
resolves both once into a single ``{race_id: session}`` mapping. Each session
remembers where it was found so edits can be written back to the same place.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from kartstandings.models.event import Event
from kartstandings.models.result import RaceResult

LegacyField = Literal["race1_results", "race2_results"]

LEGACY_SESSIONS: tuple[tuple[str, LegacyField], ...] = (
    ("race1", "race1_results"),
    ("race2", "race2_results"),
)


@dataclass(frozen=True)
class RacesSession:
    """A session stored in the event's ``races`` map."""

    race_id: str
    results: Mapping[str, RaceResult]

    def with_result(self, event: Event, driver_id: str, result: RaceResult) -> Event:
        races = dict(event.races or {})
        races[self.race_id] = {**races.get(self.race_id, {}), driver_id: result}
        return event.model_copy(update={"races": races})

    def without_driver(self, event: Event, driver_id: str) -> Event:
        races = dict(event.races or {})
        session = dict(races.get(self.race_id, {}))
        session.pop(driver_id, None)
        races[self.race_id] = session
        return event.model_copy(update={"races": races})

    def removed_from(self, event: Event) -> Event:
        races = {k: v for k, v in (event.races or {}).items() if k != self.race_id}
        return event.model_copy(update={"races": races})


@dataclass(frozen=True)
class LegacySession:
    """A session stored in one of the two fixed legacy fields."""

    race_id: str
    field: LegacyField
    results: Mapping[str, RaceResult]

    def with_result(self, event: Event, driver_id: str, result: RaceResult) -> Event:
        current = getattr(event, self.field) or {}
        return event.model_copy(update={self.field: {**current, driver_id: result}})

    def without_driver(self, event: Event, driver_id: str) -> Event:
        current = dict(getattr(event, self.field) or {})
        current.pop(driver_id, None)
        return event.model_copy(update={self.field: current})

    def removed_from(self, event: Event) -> Event:
        return event.model_copy(update={self.field: None})


EventSession = RacesSession | LegacySession


def normalize_sessions(event: Event | None) -> dict[str, EventSession]:
    """Collect every session of *event* keyed by race id.

    New-format sessions come first in stored order, then ``race1`` and
    ``race2``. A legacy session replaces a new-format session with the same id.
    """
    sessions: dict[str, EventSession] = {}
    if event is None:
        return sessions

    for race_id, results in (event.races or {}).items():
        sessions[race_id] = RacesSession(race_id=race_id, results=results)

    for race_id, field in LEGACY_SESSIONS:
        results = getattr(event, field)
        if results is not None:
            sessions[race_id] = LegacySession(race_id=race_id, field=field, results=results)

    return sessions


def find_result(
    event: Event | None,
    race_id: str,
    driver_id: str,
) -> tuple[EventSession, RaceResult] | None:
    """Return the session and the driver's result in it, or None if either is missing."""
    session = normalize_sessions(event).get(race_id)
    if session is None:
        return None
    result = session.results.get(driver_id)
    if result is None:
        return None
    return session, result
