"""Per-event aggregation for one driver, applying the drop rule."""

from __future__ import annotations

import logging

from kartstandings.models.driver import Driver
from kartstandings.models.event import Event
from kartstandings.models.result import RaceResult
from kartstandings.models.standings import EventPointsBreakdown
from kartstandings.scoring import race_points
from kartstandings.sessions import normalize_sessions

logger = logging.getLogger(__name__)

UNKNOWN_DRIVER = "Unknown Driver"


def choose_discard(
    points: dict[str, int],
    results: dict[str, RaceResult],
) -> tuple[str | None, int]:
    """Pick the session whose points are dropped and return ``(race_id, points)``.

    A result flagged ``is_dropped`` wins over the automatic choice. Otherwise
    the lowest-scoring session is dropped when the event has more than one
    session. Ties resolve to the first race id in lexicographic order.
    """
    manual = next((race_id for race_id in sorted(results) if results[race_id].is_dropped), None)
    if manual is not None:
        return manual, points.get(manual, 0)

    if len(points) > 1:
        worst = min(sorted(points), key=points.__getitem__)
        return worst, points[worst]

    return None, 0


def event_points(event: Event | None, driver_id: str | None) -> EventPointsBreakdown:
    """Compute a driver's points for one event.

    Every session of the event appears in ``race_points``; sessions the driver
    did not enter score zero and still count towards the drop rule. A driver
    with no result anywhere in the event gets an empty breakdown.
    """
    if event is None or not driver_id:
        logger.warning("Invalid event or driver id provided to event_points")
        return EventPointsBreakdown(event_id=event.id if event is not None else None)

    points: dict[str, int] = {}
    results: dict[str, RaceResult] = {}
    driver: Driver | None = None

    for race_id, session in normalize_sessions(event).items():
        result = session.results.get(driver_id)
        if result is None:
            points[race_id] = 0
            continue
        if driver is None:
            driver = Driver(id=driver_id, name=result.name or UNKNOWN_DRIVER)
        results[race_id] = result
        points[race_id] = race_points(result, driver)

    if driver is None:
        return EventPointsBreakdown(event_id=event.id)

    dropped_race_id, discarded = choose_discard(points, results)
    total = sum(points.values())
    final = max(0, total - discarded)

    logger.debug(
        "Driver %s - event %s total %d, discarded %d (%s), final %d",
        driver.name, event.id, total, discarded, dropped_race_id, final,
    )
    return EventPointsBreakdown(
        event_id=event.id,
        race_points=points,
        discarded_points=discarded,
        final_points=final,
        dropped_race_id=dropped_race_id,
    )
