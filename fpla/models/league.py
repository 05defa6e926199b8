"""
League models for Fantasy Premier League API responses.

Only the first page of standings/results is fetched; ``has_next`` tells
whether upstream holds more.
"""

from typing import Optional

from pydantic import Field, JsonValue

from .common import FplResource


class NewEntries(FplResource):
    """Managers who joined since the last standings update."""

    has_next: bool = False
    page: int = 1
    results: list[JsonValue] = Field(default_factory=list)


class League(FplResource):
    """Classic league details."""

    id: int = Field(description="League ID")
    name: str = Field(description="League name")
    created: str = ""
    closed: bool = False
    max_entries: JsonValue = None
    league_type: str = ""
    scoring: str = "c"
    admin_entry: Optional[int] = None
    start_event: int = 1
    code_privacy: str = ""
    has_cup: bool = False
    cup_league: JsonValue = None
    rank: JsonValue = None


class StandingsEntry(FplResource):
    """One row of a classic league table."""

    id: int
    entry: int = Field(description="Manager (entry) ID")
    entry_name: str = Field(description="Team name")
    player_name: str = Field(default="", description="Manager name")
    event_total: int = Field(default=0, description="Points in the current gameweek")
    total: int = Field(default=0, description="Total points")
    rank: int = 0
    last_rank: int = 0
    rank_sort: int = 0


class Standings(FplResource):
    """Page of a classic league table."""

    has_next: bool = False
    page: int = 1
    results: list[StandingsEntry] = Field(default_factory=list)


class ClassicLeague(FplResource):
    """Classic league with its standings."""

    new_entries: NewEntries = Field(default_factory=NewEntries)
    last_updated_data: Optional[str] = None
    league: League
    standings: Standings = Field(default_factory=Standings)


class H2HMatch(FplResource):
    """One head-to-head match between two managers."""

    id: int
    event: int = Field(description="Gameweek ID")
    league: int = Field(default=0, description="League ID")
    entry_1_entry: Optional[int] = None
    entry_1_name: str = ""
    entry_1_player_name: str = ""
    entry_1_points: int = 0
    entry_1_win: int = 0
    entry_1_draw: int = 0
    entry_1_loss: int = 0
    entry_1_total: int = 0
    entry_2_entry: Optional[int] = None
    entry_2_name: str = ""
    entry_2_player_name: str = ""
    entry_2_points: int = 0
    entry_2_win: int = 0
    entry_2_draw: int = 0
    entry_2_loss: int = 0
    entry_2_total: int = 0
    is_knockout: bool = False
    is_bye: bool = False
    winner: JsonValue = None
    seed_value: JsonValue = None
    tiebreak: JsonValue = None
    knockout_name: str = ""


class H2HLeague(FplResource):
    """Page of head-to-head match results."""

    has_next: bool = False
    page: int = 1
    results: list[H2HMatch] = Field(description="Matches on this page")
