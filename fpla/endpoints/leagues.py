"""
League endpoints for the Fantasy Premier League API.
"""

from ..http import FplHTTP
from ..models.league import ClassicLeague, H2HLeague


class LeaguesAPI:
    """API wrapper for league endpoints."""

    def __init__(self, http_client: FplHTTP):
        self.http = http_client

    def get_classic_league(self, league_id: int) -> ClassicLeague:
        """
        Get a classic league and the first page of its standings.

        Args:
            league_id: League ID

        Returns:
            ClassicLeague object
        """
        return self.http.fetch(f"leagues-classic/{league_id}/standings/", ClassicLeague)

    def get_h2h_league(self, league_id: int) -> H2HLeague:
        """
        Get the first page of a head-to-head league's match results.

        Args:
            league_id: League ID

        Returns:
            H2HLeague object
        """
        return self.http.fetch(f"leagues-h2h-matches/league/{league_id}/", H2HLeague)
