"""
Test configuration and fixtures for the Fantasy Premier League API client tests.
"""

import threading
from collections import Counter
from typing import Any, Callable, Optional, Union

import httpx
import pytest

Route = Union[Any, Callable[[httpx.Request], httpx.Response]]


class FakeUpstream:
    """
    In-memory stand-in for the upstream API, served through httpx.MockTransport.

    Routes map a path (with query string, if any) relative to /api/ to either
    a JSON-serialisable payload or a callable returning an httpx.Response.
    Every request is counted per route.
    """

    def __init__(self):
        self.routes: dict[str, Route] = {}
        self.calls: Counter = Counter()
        self._lock = threading.Lock()

    def add(self, path: str, payload: Route) -> None:
        self.routes[path] = payload

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path.removeprefix("/api/")
        if request.url.query:
            path = f"{path}?{request.url.query.decode()}"

        with self._lock:
            self.calls[path] += 1

        if path not in self.routes:
            return httpx.Response(404, json={"detail": "Not found."})

        route = self.routes[path]
        if callable(route):
            return route(request)
        return httpx.Response(200, json=route)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def mock_settings(monkeypatch):
    """Mock settings for testing."""
    from fpla.config import Settings

    monkeypatch.setenv("FPL_BASE_URL", "https://fpl.test/api")
    monkeypatch.setenv("FPL_TIMEOUT", "5")
    monkeypatch.setenv("FPL_USER_AGENT", "test-fpla/0.1")

    # Create settings instance directly (will read from environment)
    return Settings()


@pytest.fixture
def sample_teams():
    """The twenty teams of a standard season."""
    names = [
        ("Arsenal", "ARS"),
        ("Aston Villa", "AVL"),
        ("Bournemouth", "BOU"),
        ("Brentford", "BRE"),
        ("Brighton", "BHA"),
        ("Chelsea", "CHE"),
        ("Crystal Palace", "CRY"),
        ("Everton", "EVE"),
        ("Fulham", "FUL"),
        ("Ipswich", "IPS"),
        ("Leicester", "LEI"),
        ("Liverpool", "LIV"),
        ("Man City", "MCI"),
        ("Man Utd", "MUN"),
        ("Newcastle", "NEW"),
        ("Nott'm Forest", "NFO"),
        ("Southampton", "SOU"),
        ("Spurs", "TOT"),
        ("West Ham", "WHU"),
        ("Wolves", "WOL"),
    ]
    return [
        {
            "id": index,
            "code": 100 + index,
            "name": name,
            "short_name": short_name,
            "form": None,
            "team_division": None,
            "strength": 3,
            "pulse_id": index,
        }
        for index, (name, short_name) in enumerate(names, start=1)
    ]


@pytest.fixture
def sample_players():
    """A handful of players, one of them pointing at an unknown team."""
    return [
        {
            "id": 1,
            "first_name": "David",
            "second_name": "Raya Martin",
            "web_name": "Raya",
            "team": 1,
            "element_type": 1,
            "now_cost": 55,
            "squad_number": None,
            "chance_of_playing_next_round": None,
        },
        {
            "id": 2,
            "first_name": "Ollie",
            "second_name": "Watkins",
            "web_name": "Watkins",
            "team": 2,
            "element_type": 4,
            "now_cost": 90,
            "total_points": 120,
        },
        {
            "id": 3,
            "first_name": "Mohamed",
            "second_name": "Salah",
            "web_name": "M.Salah",
            "team": 12,
            "element_type": 3,
            "now_cost": 130,
            "news": "",
            "future_upstream_field": {"ignored": True},
        },
        {
            "id": 4,
            "first_name": "Ghost",
            "second_name": "Player",
            "web_name": "Ghost",
            "team": 99,
            "element_type": 2,
        },
    ]


@pytest.fixture
def sample_events():
    """Gameweek summaries."""
    return [
        {
            "id": gameweek_id,
            "name": f"Gameweek {gameweek_id}",
            "deadline_time": f"2024-08-{10 + gameweek_id:02d}T17:30:00Z",
            "finished": gameweek_id < 3,
            "is_current": gameweek_id == 2,
            "chip_plays": [{"chip_name": "wildcard", "num_played": 1000}],
            "top_element_info": {"id": 3, "points": 14} if gameweek_id < 3 else None,
        }
        for gameweek_id in range(1, 6)
    ]


@pytest.fixture
def sample_bootstrap(sample_teams, sample_players, sample_events):
    """Static reference snapshot payload."""
    return {
        "events": sample_events,
        "game_settings": {
            "squad_squadsize": 15,
            "squad_team_limit": 3,
            "cup_start_event_id": None,
            "cup_type": "knockout",
            "timezone": "UTC",
        },
        "phases": [
            {"id": 1, "name": "Overall", "start_event": 1, "stop_event": 38},
            {"id": 2, "name": "August", "start_event": 1, "stop_event": 3},
        ],
        "teams": sample_teams,
        "total_players": 11000000,
        "elements": sample_players,
        "element_stats": [{"label": "Minutes played", "name": "minutes"}],
        "element_types": [
            {"id": 1, "singular_name_short": "GKP", "squad_select": 2},
            {"id": 2, "singular_name_short": "DEF", "squad_select": 5},
            {"id": 3, "singular_name_short": "MID", "squad_select": 5},
            {"id": 4, "singular_name_short": "FWD", "squad_select": 3},
        ],
    }


def make_fixture(fixture_id: int, event: Optional[int], team_h: int = 14, team_a: int = 9, **extra):
    """Build a fixture payload."""
    fixture = {
        "id": fixture_id,
        "code": 2444000 + fixture_id,
        "event": event,
        "finished": True,
        "kickoff_time": "2024-08-16T19:00:00Z",
        "minutes": 90,
        "started": True,
        "team_h": team_h,
        "team_h_score": 1,
        "team_a": team_a,
        "team_a_score": 0,
        "team_h_difficulty": 3,
        "team_a_difficulty": 4,
        "stats": [
            {
                "identifier": "goals_scored",
                "a": [],
                "h": [{"value": 1, "element": 389}],
            }
        ],
        "pulse_id": 115827,
    }
    fixture.update(extra)
    return fixture


@pytest.fixture
def sample_fixtures():
    """Full fixture list: two scheduled in gameweek 7, one unscheduled."""
    return [
        make_fixture(64, 7, team_h=1, team_a=2),
        make_fixture(65, 7),
        make_fixture(380, None, team_h=20, team_a=19, finished=False, started=None,
                     team_h_score=None, team_a_score=None, kickoff_time=None),
    ]


@pytest.fixture
def upstream(sample_bootstrap, sample_fixtures):
    """Fake upstream with the snapshot and fixture endpoints wired up."""
    fake = FakeUpstream()
    fake.add("bootstrap-static/", sample_bootstrap)
    fake.add("fixtures/", sample_fixtures)
    fake.add(
        "fixtures/?event=7",
        [fixture for fixture in sample_fixtures if fixture["event"] == 7],
    )
    return fake


@pytest.fixture
def client(mock_settings, upstream):
    """Client talking to the fake upstream."""
    from fpla.client import FplClient

    fpl = FplClient(mock_settings, transport=upstream.transport)
    yield fpl
    fpl.close()


# Skip tests that require network access by default
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring network access"
    )
