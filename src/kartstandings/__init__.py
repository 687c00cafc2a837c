"""kartstandings — Standings engine for a kart racing championship."""

from kartstandings.editing import (
    add_event,
    delete_driver_from_championship,
    delete_driver_from_race,
    delete_event,
    delete_race,
    toggle_drop,
    touch,
    update_event,
)
from kartstandings.event_points import event_points
from kartstandings.exceptions import (
    ChampionshipValidationError,
    KartStandingsError,
    StorageAPIError,
    StorageConnectionError,
    StorageError,
    StorageTimeoutError,
)
from kartstandings.models import (
    Championship,
    Driver,
    DriverStanding,
    Event,
    EventPointsBreakdown,
    RaceResult,
    RaceStatistics,
)
from kartstandings.scoring import preview_points, race_points
from kartstandings.standings import standings
from kartstandings.statistics import race_statistics

__all__ = [
    "Championship",
    "ChampionshipValidationError",
    "Driver",
    "DriverStanding",
    "Event",
    "EventPointsBreakdown",
    "KartStandingsError",
    "RaceResult",
    "RaceStatistics",
    "StorageAPIError",
    "StorageConnectionError",
    "StorageError",
    "StorageTimeoutError",
    "add_event",
    "delete_driver_from_championship",
    "delete_driver_from_race",
    "delete_event",
    "delete_race",
    "event_points",
    "preview_points",
    "race_points",
    "race_statistics",
    "standings",
    "toggle_drop",
    "touch",
    "update_event",
]

__version__ = "0.1.0"
