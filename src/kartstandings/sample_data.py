"""Default and demo championships."""

from __future__ import annotations

from datetime import datetime, timezone

from kartstandings.models.championship import Championship
from kartstandings.models.event import Event
from kartstandings.models.result import RaceResult


def _driver_id(name: str) -> str:
    return "-".join(name.lower().split())


def _result(
    name: str,
    position: int,
    pole_position: bool = False,
    fastest_lap: bool = False,
    most_consistent: bool = False,
) -> tuple[str, RaceResult]:
    driver_id = _driver_id(name)
    return driver_id, RaceResult(
        id=driver_id,
        name=name,
        position=position,
        pole_position=pole_position,
        fastest_lap=fastest_lap,
        most_consistent=most_consistent,
        participated=True,
    )


def create_empty_championship(now: datetime | None = None) -> Championship:
    """Championship served when nothing has been stored yet."""
    stamp = (now or datetime.now(timezone.utc)).isoformat()
    return Championship(
        id="championship-2024",
        name="Campionato Kart 2024",
        season="2024",
        created_at=stamp,
        updated_at=stamp,
    )


def create_sample_championship() -> Championship:
    """Two legacy-layout events with eight drivers."""
    monza = Event(
        id="gp-monza-2024",
        name="GP Monza",
        date="2024-01-15",
        race1_results=dict([
            _result("Marco Rossi", 1, pole_position=True),
            _result("Luca Ferrari", 2, fastest_lap=True),
            _result("Alessandro Bianchi", 3),
            _result("Max Verstappen", 4, most_consistent=True),
            _result("Giulia Conti", 5),
            _result("Matteo Romano", 6),
            _result("Andrea Lombardi", 7),
            _result("Sara Moretti", 8),
        ]),
        race2_results=dict([
            _result("Luca Ferrari", 1, pole_position=True, fastest_lap=True),
            _result("Alessandro Bianchi", 2),
            _result("Marco Rossi", 3, most_consistent=True),
            _result("Giulia Conti", 4),
            _result("Max Verstappen", 5),
            _result("Sara Moretti", 6),
            _result("Matteo Romano", 7),
            _result("Andrea Lombardi", 8),
        ]),
    )
    imola = Event(
        id="gp-imola-2024",
        name="GP Imola",
        date="2024-02-20",
        race1_results=dict([
            _result("Alessandro Bianchi", 1, pole_position=True, most_consistent=True),
            _result("Marco Rossi", 2),
            _result("Max Verstappen", 3, fastest_lap=True),
            _result("Luca Ferrari", 4),
            _result("Sara Moretti", 5),
            _result("Giulia Conti", 6),
            _result("Matteo Romano", 7),
            _result("Andrea Lombardi", 8),
        ]),
        race2_results=dict([
            _result("Marco Rossi", 1, fastest_lap=True),
            _result("Luca Ferrari", 2, pole_position=True),
            _result("Max Verstappen", 3, most_consistent=True),
            _result("Alessandro Bianchi", 4),
            _result("Giulia Conti", 5),
            _result("Matteo Romano", 6),
            _result("Sara Moretti", 7),
            _result("Andrea Lombardi", 8),
        ]),
    )
    return Championship(
        id="championship-2024",
        name="Campionato Kart 2024",
        season="2024",
        events=[monza, imola],
    )
