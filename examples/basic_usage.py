"""Basic usage examples for the kart standings engine."""

from kartstandings import preview_points, race_statistics, standings, toggle_drop, touch
from kartstandings.sample_data import create_sample_championship
from kartstandings.storage import get_repository


def main() -> None:
    repo = get_repository()
    try:
        championship = repo.load()
        if championship is None:
            print("No championship stored, seeding sample data.")
            championship = create_sample_championship()
            repo.save(championship)

        # Current standings
        print(f"=== {championship.name} ===")
        for pos, standing in enumerate(standings(championship), start=1):
            print(f"  {pos:2d}. {standing.driver.name:<20} {standing.total_points:3d} pts")

        # Per-event breakdown for the leader
        table = standings(championship)
        if not table:
            return
        leader = table[0]
        print(f"\n=== Breakdown for {leader.driver.name} ===")
        for breakdown in leader.race_results:
            dropped = breakdown.dropped_race_id or "-"
            print(
                f"  {breakdown.event_id}: {breakdown.race_points} "
                f"(dropped {dropped}, {breakdown.final_points} pts)"
            )

        # Manually drop the leader's first race of the first event
        if championship.events:
            event = championship.events[0]
            championship = touch(toggle_drop(championship, leader.driver.id, event.id, "race1"))
            backup = repo.atomic_update(championship, backup=True)
            print(f"\nToggled drop for {leader.driver.name} in {event.name}, backup at {backup}")

        # Points preview for a hypothetical result
        print(f"\nP1 with pole and fastest lap: {preview_points('Luca Ferrari', 1, True, True)} pts")

        # Statistics
        stats = race_statistics(championship)
        print("\n=== Statistics ===")
        print(f"  Events: {stats.total_events}, races: {stats.total_races}")
        print(f"  Most wins: {stats.top_performers.most_wins.name} ({stats.top_performers.most_wins.count})")
        progress = stats.championship_progress
        print(f"  Leader: {progress.leader} ({progress.points} pts, +{progress.margin})")
    finally:
        repo.close()


if __name__ == "__main__":
    main()
