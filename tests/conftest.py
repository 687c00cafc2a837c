"""Shared test fixtures and sample championship payloads."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from kartstandings.models.championship import Championship
from kartstandings.models.event import Event
from kartstandings.models.result import RaceResult

UPSTASH_URL = "https://example.upstash.io"
UPSTASH_TOKEN = "test-token"


SAMPLE_RESULT = {
    "id": "marco-rossi",
    "name": "Marco Rossi",
    "position": 1,
    "polePosition": True,
    "fastestLap": False,
    "mostConsistent": False,
    "participated": True,
}

SAMPLE_EVENT = {
    "id": "gp-lonato",
    "name": "GP Lonato",
    "date": "2025-03-09",
    "races": {
        "heat-a": {
            "marco-rossi": SAMPLE_RESULT,
            "max-verstappen": {
                "id": "max-verstappen",
                "name": "Max Verstappen",
                "position": 1,
                "polePosition": False,
                "fastestLap": True,
                "mostConsistent": False,
                "participated": True,
            },
        },
        "heat-b": {
            "marco-rossi": {
                "id": "marco-rossi",
                "name": "Marco Rossi",
                "position": 3,
                "polePosition": False,
                "fastestLap": False,
                "mostConsistent": False,
                "participated": True,
            },
            "max-verstappen": {
                "id": "max-verstappen",
                "name": "Max Verstappen",
                "position": 0,
                "polePosition": False,
                "fastestLap": False,
                "mostConsistent": False,
                "participated": False,
            },
        },
    },
}

SAMPLE_LEGACY_EVENT = {
    "id": "gp-monza",
    "name": "GP Monza",
    "date": "2024-01-15",
    "race1Results": {
        "luca-ferrari": {
            "id": "luca-ferrari",
            "name": "Luca Ferrari",
            "position": 2,
            "polePosition": False,
            "fastestLap": True,
            "mostConsistent": False,
            "participated": True,
        },
    },
    "race2Results": {
        "luca-ferrari": {
            "id": "luca-ferrari",
            "name": "Luca Ferrari",
            "position": 1,
            "polePosition": True,
            "fastestLap": True,
            "mostConsistent": False,
            "participated": True,
        },
    },
}

SAMPLE_CHAMPIONSHIP = {
    "id": "championship-2025",
    "name": "Campionato Kart 2025",
    "season": "2025",
    "drivers": [],
    "events": [SAMPLE_EVENT, SAMPLE_LEGACY_EVENT],
    "leaders": [{"id": "leader-1", "name": "Giorgio", "isCreator": True}],
    "createdAt": "2025-01-01T00:00:00+00:00",
    "updatedAt": "2025-01-01T00:00:00+00:00",
}


def _make_result(
    driver_id: str = "marco-rossi",
    name: str = "Marco Rossi",
    position: int | None = 1,
    participated: bool = True,
    pole_position: bool = False,
    fastest_lap: bool = False,
    most_consistent: bool = False,
    is_dropped: bool = False,
) -> RaceResult:
    return RaceResult(
        id=driver_id,
        name=name,
        position=position,
        participated=participated,
        pole_position=pole_position,
        fastest_lap=fastest_lap,
        most_consistent=most_consistent,
        is_dropped=is_dropped,
    )


def _make_event(
    event_id: str = "event-1",
    races: dict[str, dict[str, RaceResult]] | None = None,
    **legacy: Any,
) -> Event:
    return Event(id=event_id, name=event_id, date="2025-01-01", races=races, **legacy)


@pytest.fixture(autouse=True)
def _log_to_tmp_path(tmp_path):
    """Send the call log to tmp_path instead of the working directory."""
    import kartstandings._logging as mod

    old_logger = mod._logger
    old_dir = mod._LOG_DIR
    old_file = mod._LOG_FILE

    named_logger = logging.getLogger("kartstandings")
    named_logger.handlers.clear()

    mod._logger = None
    mod._LOG_DIR = str(tmp_path / "logs")
    mod._LOG_FILE = str(tmp_path / "logs" / "kartstandings.log")

    yield tmp_path / "logs"

    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    mod._logger = old_logger
    mod._LOG_DIR = old_dir
    mod._LOG_FILE = old_file


@pytest.fixture
def make_result():
    """Factory fixture for race results."""
    return _make_result


@pytest.fixture
def make_event():
    """Factory fixture for events."""
    return _make_event


@pytest.fixture
def championship() -> Championship:
    return Championship.model_validate(SAMPLE_CHAMPIONSHIP)
