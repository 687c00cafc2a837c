"""Championship-wide race statistics."""

from __future__ import annotations

from dataclasses import dataclass

from kartstandings.models.championship import Championship
from kartstandings.models.result import RaceResult
from kartstandings.models.statistics import (
    ChampionshipProgress,
    MostActiveDriver,
    PerformerCount,
    RaceStatistics,
    TopPerformers,
)
from kartstandings.sessions import normalize_sessions
from kartstandings.standings import standings


@dataclass
class _DriverTally:
    name: str
    races_participated: int = 0
    wins: int = 0
    poles: int = 0
    fastest_laps: int = 0
    consistent_races: int = 0

    def add(self, result: RaceResult) -> None:
        if not result.participated:
            return
        self.races_participated += 1
        if result.position == 1:
            self.wins += 1
        if result.pole_position:
            self.poles += 1
        if result.fastest_lap:
            self.fastest_laps += 1
        if result.most_consistent:
            self.consistent_races += 1


def _top(tallies: list[_DriverTally], attribute: str) -> PerformerCount:
    """Driver with the strictly highest count; the first one wins ties."""
    best = PerformerCount()
    for tally in tallies:
        count = getattr(tally, attribute)
        if count > best.count:
            best = PerformerCount(name=tally.name, count=count)
    return best


def _progress(championship: Championship) -> ChampionshipProgress:
    table = standings(championship)
    if not table:
        return ChampionshipProgress()
    leader = table[0]
    margin = leader.total_points - table[1].total_points if len(table) > 1 else 0
    return ChampionshipProgress(leader=leader.driver.name, points=leader.total_points, margin=margin)


def race_statistics(championship: Championship | None) -> RaceStatistics:
    """Summarize sessions, drivers and achievements across the championship."""
    if championship is None:
        return RaceStatistics()

    tallies: dict[str, _DriverTally] = {}
    total_races = 0
    total_results = 0

    for event in championship.events:
        for session in normalize_sessions(event).values():
            total_races += 1
            for driver_id, result in session.results.items():
                total_results += 1
                key = result.id or driver_id
                tally = tallies.setdefault(key, _DriverTally(name=result.name or key))
                tally.add(result)

    drivers = list(tallies.values())
    active = _top(drivers, "races_participated")
    average = round(total_results / total_races, 2) if total_races else 0.0

    return RaceStatistics(
        total_events=len(championship.events),
        total_races=total_races,
        total_drivers=total_results,
        unique_drivers=len(tallies),
        average_drivers_per_race=average,
        most_active_driver=MostActiveDriver(name=active.name, races_participated=active.count),
        top_performers=TopPerformers(
            most_wins=_top(drivers, "wins"),
            most_poles=_top(drivers, "poles"),
            most_fastest_laps=_top(drivers, "fastest_laps"),
            most_consistent=_top(drivers, "consistent_races"),
        ),
        championship_progress=_progress(championship),
    )
