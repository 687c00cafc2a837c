"""Championship standings across all events."""

from __future__ import annotations

import logging

from kartstandings.event_points import event_points
from kartstandings.models.championship import Championship
from kartstandings.models.driver import Driver
from kartstandings.models.standings import DriverStanding
from kartstandings.sessions import normalize_sessions

logger = logging.getLogger(__name__)


def discover_drivers(championship: Championship | None) -> dict[str, Driver]:
    """Every driver id found in any session of any event, first-seen name wins.

    Results without both an id and a name are not counted.
    """
    drivers: dict[str, Driver] = {}
    if championship is None:
        return drivers

    for event in championship.events:
        for session in normalize_sessions(event).values():
            for result in session.results.values():
                if not result.id or not result.name:
                    continue
                if result.id not in drivers:
                    drivers[result.id] = Driver(id=result.id, name=result.name)
    return drivers


def driver_standing(championship: Championship, driver: Driver) -> DriverStanding:
    """Aggregate one driver's breakdowns over the events in championship order."""
    breakdowns = [event_points(event, driver.id) for event in championship.events]
    return DriverStanding(
        driver=driver,
        total_points=sum(b.final_points for b in breakdowns),
        race_results=breakdowns,
    )


def standings(championship: Championship | None) -> list[DriverStanding]:
    """Standings sorted by total points descending, then driver name ascending.

    Names compare case-insensitively first; the exact name breaks any
    remaining tie.
    """
    if championship is None:
        return []

    table = [driver_standing(championship, driver) for driver in discover_drivers(championship).values()]
    logger.debug("Computed standings for %d drivers", len(table))
    return sorted(table, key=lambda s: (-s.total_points, s.driver.name.casefold(), s.driver.name))
