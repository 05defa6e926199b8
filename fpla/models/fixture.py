"""
Fixture models for Fantasy Premier League API responses.
"""

from typing import Optional

from pydantic import Field

from .common import FplResource


class FixtureStatValue(FplResource):
    """One player's value for a fixture statistic."""

    value: int = Field(description="Statistic value")
    element: int = Field(description="Player ID")


class FixtureStat(FplResource):
    """Statistic (goals, assists, bonus, ...) split by home and away side."""

    identifier: str = Field(description="Statistic identifier (e.g. 'goals_scored')")
    a: list[FixtureStatValue] = Field(default_factory=list, description="Away side")
    h: list[FixtureStatValue] = Field(default_factory=list, description="Home side")


class Fixture(FplResource):
    """One match."""

    id: int = Field(description="Fixture ID")
    code: int = Field(default=0, description="Stable fixture code")
    # Unset until the match is scheduled into a gameweek
    event: Optional[int] = Field(None, description="Gameweek ID")
    finished: bool = Field(default=False, description="Whether the match is over")
    finished_provisional: bool = False
    kickoff_time: Optional[str] = Field(None, description="Kickoff (ISO 8601)")
    minutes: int = Field(default=0, description="Minutes played")
    provisional_start_time: bool = False
    started: Optional[bool] = None
    team_h: int = Field(description="Home team ID")
    team_h_score: Optional[int] = Field(None, description="Home team goals")
    team_a: int = Field(description="Away team ID")
    team_a_score: Optional[int] = Field(None, description="Away team goals")
    team_h_difficulty: int = 0
    team_a_difficulty: int = 0
    stats: list[FixtureStat] = Field(default_factory=list)
    pulse_id: int = 0


Fixtures = list[Fixture]
