"""Tests for championship race statistics."""

from __future__ import annotations

from kartstandings.models.championship import Championship
from kartstandings.models.statistics import RaceStatistics
from kartstandings.sample_data import create_sample_championship
from kartstandings.statistics import race_statistics


class TestRaceStatistics:
    def test_sample_championship(self) -> None:
        stats = race_statistics(create_sample_championship())
        assert stats.total_events == 2
        assert stats.total_races == 4
        assert stats.total_drivers == 32
        assert stats.unique_drivers == 8
        assert stats.average_drivers_per_race == 8.0

    def test_top_performers(self) -> None:
        performers = race_statistics(create_sample_championship()).top_performers
        assert (performers.most_wins.name, performers.most_wins.count) == ("Marco Rossi", 2)
        assert (performers.most_poles.name, performers.most_poles.count) == ("Luca Ferrari", 2)
        assert (performers.most_fastest_laps.name, performers.most_fastest_laps.count) == ("Luca Ferrari", 2)
        assert (performers.most_consistent.name, performers.most_consistent.count) == ("Max Verstappen", 2)

    def test_most_active_tie_goes_to_first_driver(self) -> None:
        active = race_statistics(create_sample_championship()).most_active_driver
        assert active.name == "Marco Rossi"
        assert active.races_participated == 4

    def test_championship_progress(self) -> None:
        progress = race_statistics(create_sample_championship()).championship_progress
        assert progress.leader == "Marco Rossi"
        assert progress.points == 54
        assert progress.margin == 1

    def test_non_participants_not_tallied(self, championship) -> None:
        stats = race_statistics(championship)
        assert stats.total_races == 4
        assert stats.total_drivers == 6
        assert stats.average_drivers_per_race == 1.5
        assert stats.most_active_driver.name == "Marco Rossi"
        assert stats.most_active_driver.races_participated == 2

    def test_single_driver_has_no_margin(self, make_event, make_result) -> None:
        championship = Championship(events=[make_event(races={"h": {"a": make_result("a", "A")}})])
        progress = race_statistics(championship).championship_progress
        assert (progress.leader, progress.points, progress.margin) == ("A", 25, 0)

    def test_empty(self) -> None:
        stats = race_statistics(Championship())
        assert stats == RaceStatistics()
        assert stats.top_performers.most_wins.name == "N/A"
        assert stats.championship_progress.leader == "N/A"

    def test_none(self) -> None:
        assert race_statistics(None) == RaceStatistics()

    def test_dump_uses_camel_case(self) -> None:
        data = race_statistics(create_sample_championship()).model_dump(by_alias=True)
        assert data["averageDriversPerRace"] == 8.0
        assert data["topPerformers"]["mostWins"] == {"name": "Marco Rossi", "count": 2}
        assert data["championshipProgress"]["leader"] == "Marco Rossi"
