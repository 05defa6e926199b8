"""
Live gameweek models.

Unlike the snapshot these change minute to minute during matches, so they
are fetched fresh on every request.
"""

from typing import Optional

from pydantic import Field

from .common import FplResource


class LiveStats(FplResource):
    """A player's statistics for one gameweek."""

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
    influence: str = "0.0"
    creativity: str = "0.0"
    threat: str = "0.0"
    ict_index: str = "0.0"
    starts: int = 0
    expected_goals: str = "0.00"
    expected_assists: str = "0.00"
    expected_goal_involvements: str = "0.00"
    expected_goals_conceded: str = "0.00"
    total_points: int = Field(default=0, description="Points scored in the gameweek")
    in_dreamteam: bool = False


class ExplainStat(FplResource):
    """Points breakdown entry."""

    identifier: str = Field(description="Statistic identifier")
    points: int = Field(default=0, description="Points awarded")
    value: int = Field(default=0, description="Statistic value")


class Explain(FplResource):
    """Points breakdown for one fixture."""

    fixture: int = Field(description="Fixture ID")
    stats: list[ExplainStat] = Field(default_factory=list)


class LiveElement(FplResource):
    """Live data for one player."""

    id: int = Field(description="Player ID")
    stats: LiveStats = Field(default_factory=LiveStats)
    explain: list[Explain] = Field(default_factory=list)


class LiveGameweek(FplResource):
    """Live statistics for every player in a gameweek."""

    elements: list[LiveElement] = Field(description="Every player's live data")

    def get_element(self, player_id: int) -> Optional[LiveElement]:
        """Live data for one player, or None."""
        for element in self.elements:
            if element.id == player_id:
                return element
        return None
