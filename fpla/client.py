"""
Main client for the Fantasy Premier League API.
"""

from collections.abc import Iterable
from typing import Optional

import httpx

from .cache import SnapshotCache
from .config import Settings
from .endpoints.entries import EntriesAPI
from .endpoints.fixtures import FixturesAPI
from .endpoints.gameweeks import GameweeksAPI
from .endpoints.leagues import LeaguesAPI
from .endpoints.static import StaticAPI
from .http import FplHTTP
from .models.bootstrap import BootstrapStatic, Event, Phase, Player, PlayerType, Team
from .models.fixture import Fixture, Fixtures
from .models.league import ClassicLeague, H2HLeague
from .models.live import LiveGameweek
from .models.picks import UserPicks
from .models.transfer import Transfers
from .models.user import User


class FplClient:
    """
    Main client for the Fantasy Premier League API.

    Provides access to all API endpoints through a unified interface. Team,
    player and gameweek summary lookups read from a snapshot of the static
    reference data that is fetched once per client and never refreshed;
    create a new client to see fresh reference data.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the Fantasy Premier League API client.

        Args:
            settings: Configuration settings (will load from environment if not provided)
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """

        if settings is None:
            settings = Settings()

        self.settings = settings
        self.http = FplHTTP(settings, transport=transport)
        self.snapshot_cache = SnapshotCache(self.http)

        self.static = StaticAPI(self.snapshot_cache)
        self.fixtures = FixturesAPI(self.http)
        self.entries = EntriesAPI(self.http)
        self.leagues = LeaguesAPI(self.http)
        self.gameweeks = GameweeksAPI(self.http)

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - cleanup resources."""
        self.close()

    def close(self) -> None:
        """Close HTTP connections."""
        self.http.close()

    @property
    def snapshot_loaded(self) -> bool:
        """Whether the static reference snapshot has been fetched."""
        return self.snapshot_cache.is_populated

    # Managers

    def get_user(self, user_id: int) -> User:
        return self.entries.get_user(user_id)

    def get_user_picks(self, user_id: int, gameweek_id: int) -> UserPicks:
        return self.entries.get_user_picks(user_id, gameweek_id)

    def get_user_transfers(self, user_id: int) -> Transfers:
        return self.entries.get_user_transfers(user_id)

    # Fixtures

    def get_fixtures(self) -> Fixtures:
        return self.fixtures.get_fixtures()

    def get_gameweek_fixtures(self, gameweek_id: int) -> Fixtures:
        return self.fixtures.get_gameweek_fixtures(gameweek_id)

    def get_fixture(self, fixture_id: int) -> Fixture:
        return self.fixtures.get_fixture(fixture_id)

    # Gameweeks

    def get_static_gameweek(self, gameweek_id: int) -> Optional[Event]:
        return self.static.get_static_gameweek(gameweek_id)

    def get_static_gameweeks(self) -> list[Event]:
        return self.static.get_static_gameweeks()

    def get_live_gameweek(self, gameweek_id: int) -> LiveGameweek:
        return self.gameweeks.get_live_gameweek(gameweek_id)

    # Leagues

    def get_classic_league(self, league_id: int) -> ClassicLeague:
        return self.leagues.get_classic_league(league_id)

    def get_h2h_league(self, league_id: int) -> H2HLeague:
        return self.leagues.get_h2h_league(league_id)

    # Teams

    def get_team(self, team_id: int) -> Optional[Team]:
        return self.static.get_team(team_id)

    def get_teams(self, team_ids: Optional[Iterable[int]] = None) -> list[Team]:
        return self.static.get_teams(team_ids)

    def get_all_teams(self) -> list[Team]:
        return self.static.get_all_teams()

    # Players

    def get_player(self, player_id: int) -> Optional[Player]:
        return self.static.get_player(player_id)

    def get_players(self, player_ids: Optional[Iterable[int]] = None) -> list[Player]:
        return self.static.get_players(player_ids)

    def get_all_players(self) -> list[Player]:
        return self.static.get_all_players()

    def get_player_type(self, player_type_id: int) -> Optional[PlayerType]:
        return self.static.get_player_type(player_type_id)

    def get_player_types(self) -> list[PlayerType]:
        return self.static.get_player_types()

    def get_phases(self) -> list[Phase]:
        return self.static.get_phases()

    def get_bootstrap_snapshot(self) -> BootstrapStatic:
        """The static reference snapshot, fetched on first use."""
        return self.static.get_bootstrap_snapshot()
