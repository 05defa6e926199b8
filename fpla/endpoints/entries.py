"""
Manager ("entry") endpoints for the Fantasy Premier League API.
"""

from ..http import FplHTTP
from ..models.picks import UserPicks
from ..models.transfer import Transfers
from ..models.user import User


class EntriesAPI:
    """API wrapper for manager endpoints."""

    def __init__(self, http_client: FplHTTP):
        self.http = http_client

    def get_user(self, user_id: int) -> User:
        """
        Get a manager's profile.

        Args:
            user_id: Manager (entry) ID

        Returns:
            User with season summary and league memberships
        """
        return self.http.fetch(f"entry/{user_id}/", User)

    def get_user_picks(self, user_id: int, gameweek_id: int) -> UserPicks:
        """
        Get a manager's squad for one gameweek.

        Args:
            user_id: Manager (entry) ID
            gameweek_id: Gameweek ID

        Returns:
            UserPicks with the fifteen picks and the gameweek summary
        """
        return self.http.fetch(f"entry/{user_id}/event/{gameweek_id}/picks/", UserPicks)

    def get_user_transfers(self, user_id: int) -> Transfers:
        """Every transfer the manager has made this season, newest first."""
        return self.http.fetch(f"entry/{user_id}/transfers/", Transfers)
