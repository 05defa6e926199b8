"""
Lookups answered from the static reference snapshot.

Teams, players, gameweek summaries and player types share three query
shapes: everything, one record by id (None when absent) and a set of ids.
"""

from collections.abc import Iterable, Sequence
from typing import Optional, Protocol, TypeVar

from ..cache import SnapshotCache
from ..models.bootstrap import BootstrapStatic, Event, Phase, Player, PlayerType, Team


class _HasId(Protocol):
    id: int


R = TypeVar("R", bound=_HasId)


def find_by_id(records: Sequence[R], record_id: int) -> Optional[R]:
    """First record whose id matches, or None."""
    for record in records:
        if record.id == record_id:
            return record
    return None


def filter_by_ids(records: Sequence[R], record_ids: Optional[Iterable[int]]) -> list[R]:
    """
    Records whose id is in record_ids, in snapshot order.

    An empty (or missing) id collection asks for the whole collection.
    Ids without a matching record are skipped.
    """
    wanted = set(record_ids or ())
    if not wanted:
        return list(records)
    return [record for record in records if record.id in wanted]


class StaticAPI:
    """API wrapper for snapshot-backed lookups."""

    def __init__(self, snapshot_cache: SnapshotCache):
        self.cache = snapshot_cache

    def get_bootstrap_snapshot(self) -> BootstrapStatic:
        """The whole static reference snapshot."""
        return self.cache.get()

    # Gameweek summaries

    def get_static_gameweeks(self) -> list[Event]:
        """All gameweek summaries in season order."""
        return list(self.cache.get().events)

    def get_static_gameweek(self, gameweek_id: int) -> Optional[Event]:
        """
        Get one gameweek summary.

        Args:
            gameweek_id: Gameweek ID (1-38)

        Returns:
            The gameweek summary, or None if no such gameweek exists
        """
        return find_by_id(self.cache.get().events, gameweek_id)

    # Teams

    def get_all_teams(self) -> list[Team]:
        """All teams in snapshot order."""
        return list(self.cache.get().teams)

    def get_team(self, team_id: int) -> Optional[Team]:
        """
        Get one team.

        Args:
            team_id: Team ID

        Returns:
            The team, or None if no team has that id
        """
        return find_by_id(self.cache.get().teams, team_id)

    def get_teams(self, team_ids: Optional[Iterable[int]] = None) -> list[Team]:
        """
        Get several teams.

        Args:
            team_ids: Team IDs; empty means every team

        Returns:
            Matching teams in snapshot order; unknown ids are skipped
        """
        return filter_by_ids(self.cache.get().teams, team_ids)

    # Players

    def get_all_players(self) -> list[Player]:
        """All players in snapshot order."""
        return list(self.cache.get().elements)

    def get_player(self, player_id: int) -> Optional[Player]:
        """
        Get one player.

        Args:
            player_id: Player (element) ID

        Returns:
            The player, or None if no player has that id
        """
        return find_by_id(self.cache.get().elements, player_id)

    def get_players(self, player_ids: Optional[Iterable[int]] = None) -> list[Player]:
        """
        Get several players.

        Args:
            player_ids: Player IDs; empty means every player

        Returns:
            Matching players in snapshot order; unknown ids are skipped
        """
        return filter_by_ids(self.cache.get().elements, player_ids)

    # Auxiliary tables

    def get_phases(self) -> list[Phase]:
        """Season phases (overall and monthly)."""
        return list(self.cache.get().phases)

    def get_player_types(self) -> list[PlayerType]:
        """Playing positions."""
        return list(self.cache.get().element_types)

    def get_player_type(self, player_type_id: int) -> Optional[PlayerType]:
        """One playing position, or None."""
        return find_by_id(self.cache.get().element_types, player_type_id)
