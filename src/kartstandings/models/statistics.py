"""Race statistics summary models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

NOT_AVAILABLE = "N/A"


class PerformerCount(BaseModel):
    """Driver name with a counted achievement."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    name: str = NOT_AVAILABLE
    count: int = 0


class MostActiveDriver(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    name: str = NOT_AVAILABLE
    races_participated: int = 0


class TopPerformers(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    most_wins: PerformerCount = PerformerCount()
    most_poles: PerformerCount = PerformerCount()
    most_fastest_laps: PerformerCount = PerformerCount()
    most_consistent: PerformerCount = PerformerCount()


class ChampionshipProgress(BaseModel):
    """Current leader and their margin over second place."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    leader: str = NOT_AVAILABLE
    points: int = 0
    margin: int = 0


class RaceStatistics(BaseModel):
    """Championship-wide race statistics."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    total_events: int = 0
    total_races: int = 0
    total_drivers: int = 0
    unique_drivers: int = 0
    average_drivers_per_race: float = 0.0
    most_active_driver: MostActiveDriver = MostActiveDriver()
    top_performers: TopPerformers = TopPerformers()
    championship_progress: ChampionshipProgress = ChampionshipProgress()
