"""
Models for the static reference snapshot (``bootstrap-static``).

The snapshot holds every gameweek summary, team and player of the season
plus a few auxiliary tables. It is large and changes rarely, so the client
fetches it once and answers team/player/gameweek lookups from it.
"""

from typing import Optional

from pydantic import Field, JsonValue

from .common import FplResource


class ChipPlay(FplResource):
    """How many managers played a chip in a gameweek."""

    chip_name: str = Field(description="Chip identifier (e.g. 'wildcard')")
    num_played: int = Field(default=0, description="Number of times played")


class TopPlayerInfo(FplResource):
    """Highest scoring player of a gameweek."""

    id: int = Field(description="Player ID")
    points: int = Field(default=0, description="Points scored")


class Event(FplResource):
    """Gameweek summary as listed in the snapshot."""

    id: int = Field(description="Gameweek ID")
    name: str = Field(description="Gameweek name (e.g. 'Gameweek 1')")
    deadline_time: str = Field(description="Transfer deadline (ISO 8601)")
    average_entry_score: int = Field(default=0, description="Average manager score")
    finished: bool = Field(default=False, description="Whether the gameweek is over")
    data_checked: bool = Field(default=False, description="Whether scores are final")
    highest_scoring_entry: Optional[int] = Field(
        None, description="Manager ID with the highest score"
    )
    deadline_time_epoch: int = Field(default=0, description="Deadline as epoch seconds")
    deadline_time_game_offset: int = Field(default=0, description="Deadline offset")
    highest_score: Optional[int] = Field(None, description="Highest manager score")
    is_previous: bool = Field(default=False, description="Previous gameweek flag")
    is_current: bool = Field(default=False, description="Current gameweek flag")
    is_next: bool = Field(default=False, description="Next gameweek flag")
    cup_leagues_created: bool = Field(default=False)
    h2h_ko_matches_created: bool = Field(default=False)
    chip_plays: list[ChipPlay] = Field(default_factory=list)
    most_selected: Optional[int] = Field(None, description="Most selected player ID")
    most_transferred_in: Optional[int] = Field(
        None, description="Most transferred-in player ID"
    )
    top_element: Optional[int] = Field(None, description="Top scoring player ID")
    top_element_info: Optional[TopPlayerInfo] = None
    transfers_made: int = Field(default=0, description="Transfers made")
    most_captained: Optional[int] = Field(None, description="Most captained player ID")
    most_vice_captained: Optional[int] = Field(
        None, description="Most vice-captained player ID"
    )


class GameSettings(FplResource):
    """Season-wide game rules."""

    league_join_private_max: int = 0
    league_join_public_max: int = 0
    league_max_size_public_classic: int = 0
    league_max_size_public_h2h: int = 0
    league_max_size_private_h2h: int = 0
    league_max_ko_rounds_private_h2h: int = 0
    league_prefix_public: str = ""
    league_points_h2h_win: int = 0
    league_points_h2h_lose: int = 0
    league_points_h2h_draw: int = 0
    league_ko_first_instead_of_random: bool = False
    cup_start_event_id: JsonValue = None
    cup_stop_event_id: JsonValue = None
    cup_qualifying_method: JsonValue = None
    cup_type: JsonValue = None
    squad_squadplay: int = 0
    squad_squadsize: int = 0
    squad_team_limit: int = 0
    squad_total_spend: int = 0
    ui_currency_multiplier: int = 0
    ui_use_special_shirts: bool = False
    ui_special_shirt_exclusions: list[JsonValue] = Field(default_factory=list)
    stats_form_days: int = 0
    sys_vice_captain_enabled: bool = False
    transfers_cap: int = 0
    transfers_sell_on_fee: float = 0.0
    league_h2h_tiebreak_stats: list[str] = Field(default_factory=list)
    timezone: str = ""


class Phase(FplResource):
    """A span of gameweeks (the whole season, or a month)."""

    id: int = Field(description="Phase ID")
    name: str = Field(description="Phase name (e.g. 'Overall', 'August')")
    start_event: int = Field(description="First gameweek of the phase")
    stop_event: int = Field(description="Last gameweek of the phase")


class Team(FplResource):
    """Premier League club."""

    id: int = Field(description="Team ID")
    code: int = Field(default=0, description="Stable club code across seasons")
    name: str = Field(description="Team name")
    short_name: str = Field(default="", description="Three letter abbreviation")
    draw: int = 0
    loss: int = 0
    win: int = 0
    played: int = 0
    points: int = 0
    position: int = 0
    form: JsonValue = None
    strength: int = 0
    team_division: JsonValue = None
    unavailable: bool = False
    strength_overall_home: int = 0
    strength_overall_away: int = 0
    strength_attack_home: int = 0
    strength_attack_away: int = 0
    strength_defence_home: int = 0
    strength_defence_away: int = 0
    pulse_id: int = 0


class Player(FplResource):
    """Player ("element") of the season, with season-to-date totals."""

    id: int = Field(description="Player ID")
    code: int = Field(default=0, description="Stable player code across seasons")
    first_name: str = Field(default="", description="First name")
    second_name: str = Field(default="", description="Last name")
    web_name: str = Field(default="", description="Display name")
    team: int = Field(description="ID of the player's team")
    team_code: int = Field(default=0, description="Code of the player's team")
    element_type: int = Field(description="Position (player type) ID")
    status: str = Field(default="a", description="Availability status code")
    news: str = Field(default="", description="Injury or availability news")
    news_added: Optional[str] = Field(None, description="When the news was added")
    chance_of_playing_next_round: Optional[int] = None
    chance_of_playing_this_round: Optional[int] = None
    photo: str = ""
    squad_number: JsonValue = None
    special: bool = False

    # Price and ownership
    now_cost: int = Field(default=0, description="Price in tenths of a million")
    cost_change_event: int = 0
    cost_change_event_fall: int = 0
    cost_change_start: int = 0
    cost_change_start_fall: int = 0
    selected_by_percent: str = "0.0"
    transfers_in: int = 0
    transfers_in_event: int = 0
    transfers_out: int = 0
    transfers_out_event: int = 0

    # Points and form
    total_points: int = 0
    event_points: int = 0
    points_per_game: str = "0.0"
    form: str = "0.0"
    ep_next: Optional[str] = None
    ep_this: Optional[str] = None
    value_form: str = "0.0"
    value_season: str = "0.0"
    dreamteam_count: int = 0
    in_dreamteam: bool = False

    # Season totals
    minutes: int = 0
    goals_scored: int = 0
    assists: int = 0
    clean_sheets: int = 0
    goals_conceded: int = 0
    own_goals: int = 0
    penalties_saved: int = 0
    penalties_missed: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
    saves: int = 0
    bonus: int = 0
    bps: int = 0
    starts: int = 0
    influence: str = "0.0"
    creativity: str = "0.0"
    threat: str = "0.0"
    ict_index: str = "0.0"
    expected_goals: str = "0.00"
    expected_assists: str = "0.00"
    expected_goal_involvements: str = "0.00"
    expected_goals_conceded: str = "0.00"

    # Rankings
    influence_rank: Optional[int] = None
    influence_rank_type: Optional[int] = None
    creativity_rank: Optional[int] = None
    creativity_rank_type: Optional[int] = None
    threat_rank: Optional[int] = None
    threat_rank_type: Optional[int] = None
    ict_index_rank: Optional[int] = None
    ict_index_rank_type: Optional[int] = None
    now_cost_rank: Optional[int] = None
    now_cost_rank_type: Optional[int] = None
    form_rank: Optional[int] = None
    form_rank_type: Optional[int] = None
    points_per_game_rank: Optional[int] = None
    points_per_game_rank_type: Optional[int] = None
    selected_rank: Optional[int] = None
    selected_rank_type: Optional[int] = None

    # Set pieces
    corners_and_indirect_freekicks_order: Optional[int] = None
    corners_and_indirect_freekicks_text: str = ""
    direct_freekicks_order: Optional[int] = None
    direct_freekicks_text: str = ""
    penalties_order: Optional[int] = None
    penalties_text: str = ""

    # Per 90 rates
    expected_goals_per_90: float = 0.0
    saves_per_90: float = 0.0
    expected_assists_per_90: float = 0.0
    expected_goal_involvements_per_90: float = 0.0
    expected_goals_conceded_per_90: float = 0.0
    goals_conceded_per_90: float = 0.0
    starts_per_90: float = 0.0
    clean_sheets_per_90: float = 0.0

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return f"{self.first_name} {self.second_name}"

    def __str__(self) -> str:
        return f"<id: {self.id}, name: {self.full_name}>"


class PlayerStat(FplResource):
    """Label for a statistic column."""

    label: str = Field(description="Human readable label")
    name: str = Field(description="Field name of the statistic")


class PlayerType(FplResource):
    """Playing position (goalkeeper, defender, midfielder, forward)."""

    id: int = Field(description="Position ID")
    plural_name: str = ""
    plural_name_short: str = ""
    singular_name: str = ""
    singular_name_short: str = Field(default="", description="e.g. 'GKP', 'DEF'")
    squad_select: int = Field(default=0, description="Players of this type per squad")
    squad_min_play: int = 0
    squad_max_play: int = 0
    ui_shirt_specific: bool = False
    sub_positions_locked: list[int] = Field(default_factory=list)
    element_count: int = Field(default=0, description="Players of this type")


class BootstrapStatic(FplResource):
    """The static reference snapshot of the season."""

    events: list[Event] = Field(description="Gameweek summaries")
    game_settings: Optional[GameSettings] = None
    phases: list[Phase] = Field(default_factory=list)
    teams: list[Team] = Field(description="Teams")
    total_players: int = Field(default=0, description="Registered managers")
    elements: list[Player] = Field(description="Players")
    element_stats: list[PlayerStat] = Field(default_factory=list)
    element_types: list[PlayerType] = Field(default_factory=list)

