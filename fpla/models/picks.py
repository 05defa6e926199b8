"""
Models for a manager's squad selection in one gameweek.
"""

from typing import Optional

from pydantic import Field, JsonValue

from .common import FplResource


class EntryHistory(FplResource):
    """Manager's gameweek summary."""

    event: int = Field(description="Gameweek ID")
    points: int = 0
    total_points: int = 0
    rank: Optional[int] = None
    rank_sort: Optional[int] = None
    overall_rank: Optional[int] = None
    bank: int = Field(default=0, description="Money in the bank, in tenths")
    value: int = Field(default=0, description="Squad value, in tenths")
    event_transfers: int = 0
    event_transfers_cost: int = 0
    points_on_bench: int = 0


class Pick(FplResource):
    """One squad slot."""

    element: int = Field(description="Player ID")
    position: int = Field(description="Slot 1-15; 12-15 are the bench")
    multiplier: int = Field(default=1, description="0 benched, 2 captain, 3 triple")
    is_captain: bool = False
    is_vice_captain: bool = False


class UserPicks(FplResource):
    """A manager's squad for one gameweek."""

    active_chip: JsonValue = None
    automatic_subs: list[JsonValue] = Field(default_factory=list)
    entry_history: EntryHistory
    picks: list[Pick] = Field(default_factory=list)

    @property
    def captain(self) -> Optional[Pick]:
        """The captain's pick, if any."""
        return next((pick for pick in self.picks if pick.is_captain), None)

    @property
    def starters(self) -> list[Pick]:
        """Picks in the starting eleven."""
        return [pick for pick in self.picks if pick.position <= 11]
