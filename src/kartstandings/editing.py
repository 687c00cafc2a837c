"""Pure edits to a championship snapshot.

Every function returns a new :class:`Championship` and leaves its argument
untouched. When the target of an edit does not exist the input is returned
as is. None of these recompute standings.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from kartstandings.models.championship import Championship
from kartstandings.models.event import Event
from kartstandings.sessions import find_result, normalize_sessions

logger = logging.getLogger(__name__)


def _event_index(championship: Championship, event_id: str) -> int | None:
    return next((i for i, e in enumerate(championship.events) if e.id == event_id), None)


def _replace_event(championship: Championship, index: int, event: Event) -> Championship:
    events = list(championship.events)
    events[index] = event
    return championship.model_copy(update={"events": events})


def toggle_drop(
    championship: Championship | None,
    driver_id: str,
    event_id: str,
    race_id: str,
) -> Championship | None:
    """Flip the manual drop flag on one driver's result in one session."""
    if championship is None or not driver_id or not event_id or not race_id:
        logger.warning("Invalid parameters provided to toggle_drop")
        return championship

    index = _event_index(championship, event_id)
    if index is None:
        logger.warning("Event %s not found", event_id)
        return championship

    event = championship.events[index]
    found = find_result(event, race_id, driver_id)
    if found is None:
        logger.warning(
            "Race result not found for driver %s in event %s, race %s", driver_id, event_id, race_id,
        )
        return championship

    session, result = found
    updated = result.model_copy(update={"is_dropped": not result.is_dropped})
    logger.info(
        "Toggled drop status for driver %s in event %s, race %s: %s",
        driver_id, event_id, race_id, "DROPPED" if updated.is_dropped else "ACTIVE",
    )
    return _replace_event(championship, index, session.with_result(event, driver_id, updated))


def add_event(championship: Championship, event: Event) -> Championship:
    """Append an event."""
    return championship.model_copy(update={"events": [*championship.events, event]})


def update_event(championship: Championship, event: Event) -> Championship:
    """Replace every event sharing the id of *event*."""
    if _event_index(championship, event.id) is None:
        logger.warning("Event %s not found", event.id)
        return championship
    events = [event if e.id == event.id else e for e in championship.events]
    return championship.model_copy(update={"events": events})


def delete_event(championship: Championship, event_id: str) -> Championship:
    """Remove every event with the given id."""
    events = [e for e in championship.events if e.id != event_id]
    if len(events) == len(championship.events):
        return championship
    return championship.model_copy(update={"events": events})


def delete_race(championship: Championship, event_id: str, race_id: str) -> Championship:
    """Remove one session from an event."""
    index = _event_index(championship, event_id)
    if index is None:
        logger.warning("Event %s not found", event_id)
        return championship

    event = championship.events[index]
    session = normalize_sessions(event).get(race_id)
    if session is None:
        logger.warning("Race %s not found in event %s", race_id, event_id)
        return championship
    return _replace_event(championship, index, session.removed_from(event))


def delete_driver_from_race(
    championship: Championship,
    event_id: str,
    race_id: str,
    driver_id: str,
) -> Championship:
    """Remove one driver's result from one session."""
    index = _event_index(championship, event_id)
    if index is None:
        logger.warning("Event %s not found", event_id)
        return championship

    event = championship.events[index]
    found = find_result(event, race_id, driver_id)
    if found is None:
        logger.warning("Driver %s not found in event %s, race %s", driver_id, event_id, race_id)
        return championship
    session, _ = found
    return _replace_event(championship, index, session.without_driver(event, driver_id))


def delete_driver_from_championship(championship: Championship, driver_id: str) -> Championship:
    """Remove a driver's results from every session of every event."""
    events = []
    for event in championship.events:
        for session in normalize_sessions(event).values():
            if driver_id in session.results:
                event = session.without_driver(event, driver_id)
        events.append(event)
    return championship.model_copy(update={"events": events})


def touch(championship: Championship, now: datetime | None = None) -> Championship:
    """Stamp ``updated_at`` with the current UTC time in ISO-8601."""
    now = now or datetime.now(timezone.utc)
    return championship.model_copy(update={"updated_at": now.isoformat()})
