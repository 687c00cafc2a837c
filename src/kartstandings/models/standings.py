"""Engine output models: per-event breakdowns and driver standings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from kartstandings.models.driver import Driver


class EventPointsBreakdown(BaseModel):
    """One driver's points in one event after the drop rule."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    event_id: str | None = None
    race_points: dict[str, int] = {}
    discarded_points: int = 0
    final_points: int = 0
    dropped_race_id: str | None = None

    @property
    def total_points(self) -> int:
        """Sum of all session points before the discard."""
        return sum(self.race_points.values())


class DriverStanding(BaseModel):
    """A driver's championship total with one breakdown per event."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    driver: Driver
    total_points: int = 0
    race_results: list[EventPointsBreakdown] = []
