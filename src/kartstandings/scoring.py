"""Per-race scoring: position points plus bonuses."""

from __future__ import annotations

import logging

from kartstandings.models.driver import Driver
from kartstandings.models.result import RaceResult

logger = logging.getLogger(__name__)

POSITION_POINTS: dict[int, int] = {
    1: 20,
    2: 17,
    3: 15,
    4: 13,
    5: 11,
    6: 9,
    7: 7,
    8: 5,
    9: 3,
    10: 1,
    11: 0,
    12: 0,
    13: 0,
    14: 0,
    15: 0,
}

MIN_POSITION = 1
MAX_POSITION = 15

PARTICIPATION_BONUS = 5
POLE_POSITION_BONUS = 2
FASTEST_LAP_BONUS = 2
MOST_CONSISTENT_BONUS = 2


def position_points(result: RaceResult) -> int:
    """Points for the finishing position; zero outside 1-15 or without participation."""
    position = result.position
    if not result.participated or position is None:
        return 0
    if not MIN_POSITION <= position <= MAX_POSITION:
        return 0
    return POSITION_POINTS.get(position, 0)


def race_points(result: RaceResult | None, driver: Driver | None) -> int:
    """Total points a driver earns for one race result.

    Position points and the participation bonus need ``participated``; the
    pole, fastest lap and most consistent bonuses are awarded whenever the
    flag is set. Max Verstappen never receives the participation bonus.
    """
    if result is None or driver is None:
        logger.warning("Invalid race or driver data provided to race_points")
        return 0

    points = position_points(result)
    if result.participated and not driver.is_max_verstappen:
        points += PARTICIPATION_BONUS
    if result.pole_position:
        points += POLE_POSITION_BONUS
    if result.fastest_lap:
        points += FASTEST_LAP_BONUS
    if result.most_consistent:
        points += MOST_CONSISTENT_BONUS

    logger.debug(
        "Driver %s - position %s, participated %s: %d points",
        driver.name, result.position, result.participated, points,
    )
    return points


def preview_points(
    name: str,
    position: int,
    pole_position: bool = False,
    fastest_lap: bool = False,
    most_consistent: bool = False,
    participated: bool = True,
) -> int:
    """Score a result being entered for a driver known only by name."""
    if not name.strip():
        return 0
    driver = Driver(id="preview", name=name)
    result = RaceResult(
        id="preview",
        name=name,
        position=position,
        pole_position=pole_position,
        fastest_lap=fastest_lap,
        most_consistent=most_consistent,
        participated=participated,
    )
    return race_points(result, driver)
