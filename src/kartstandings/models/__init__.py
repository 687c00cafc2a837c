"""Kart championship data models."""

from kartstandings.models.championship import Championship
from kartstandings.models.driver import Driver
from kartstandings.models.event import Event
from kartstandings.models.result import RaceResult
from kartstandings.models.standings import DriverStanding, EventPointsBreakdown
from kartstandings.models.statistics import (
    ChampionshipProgress,
    MostActiveDriver,
    PerformerCount,
    RaceStatistics,
    TopPerformers,
)

__all__ = [
    "Championship",
    "ChampionshipProgress",
    "Driver",
    "DriverStanding",
    "Event",
    "EventPointsBreakdown",
    "MostActiveDriver",
    "PerformerCount",
    "RaceResult",
    "RaceStatistics",
    "TopPerformers",
]
