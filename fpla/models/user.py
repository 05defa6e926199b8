"""
Manager ("entry") models for Fantasy Premier League API responses.
"""

from typing import Optional

from pydantic import Field, JsonValue

from .common import FplResource


class ClassicLeagueMembership(FplResource):
    """Classic league a manager belongs to, with their rank in it."""

    id: int = Field(description="League ID")
    name: str = Field(description="League name")
    short_name: Optional[str] = None
    created: str = ""
    closed: bool = False
    rank: JsonValue = None
    max_entries: JsonValue = None
    league_type: str = Field(default="", description="'s' system, 'x' private")
    scoring: str = Field(default="c", description="'c' classic, 'h' head-to-head")
    admin_entry: Optional[int] = None
    start_event: int = 1
    entry_can_leave: bool = False
    entry_can_admin: bool = False
    entry_can_invite: bool = False
    has_cup: bool = False
    cup_league: JsonValue = None
    cup_qualified: JsonValue = None
    entry_rank: Optional[int] = Field(None, description="Manager's rank")
    entry_last_rank: Optional[int] = Field(None, description="Manager's previous rank")


class CupStatus(FplResource):
    """Cup qualification state."""

    qualification_event: JsonValue = None
    qualification_numbers: JsonValue = None
    qualification_rank: JsonValue = None
    qualification_state: JsonValue = None


class Cup(FplResource):
    """Manager's cup progress."""

    matches: list[JsonValue] = Field(default_factory=list)
    status: CupStatus = Field(default_factory=CupStatus)
    cup_league: JsonValue = None


class Leagues(FplResource):
    """Leagues a manager belongs to."""

    classic: list[ClassicLeagueMembership] = Field(default_factory=list)
    h2h: list[JsonValue] = Field(default_factory=list)
    cup: Cup = Field(default_factory=Cup)
    cup_matches: list[JsonValue] = Field(default_factory=list)


class User(FplResource):
    """Manager profile and season summary."""

    id: int = Field(description="Manager (entry) ID")
    name: str = Field(description="Team name")
    player_first_name: str = ""
    player_last_name: str = ""
    joined_time: str = ""
    started_event: int = Field(default=1, description="First gameweek played")
    favourite_team: Optional[int] = Field(None, description="Supported team ID")
    player_region_id: int = 0
    player_region_name: str = ""
    player_region_iso_code_short: str = ""
    player_region_iso_code_long: str = ""
    summary_overall_points: Optional[int] = None
    summary_overall_rank: Optional[int] = None
    summary_event_points: Optional[int] = None
    summary_event_rank: Optional[int] = None
    current_event: Optional[int] = None
    leagues: Leagues = Field(default_factory=Leagues)
    name_change_blocked: bool = False
    kit: JsonValue = None
    last_deadline_bank: Optional[int] = None
    last_deadline_value: Optional[int] = None
    last_deadline_total_transfers: int = 0
