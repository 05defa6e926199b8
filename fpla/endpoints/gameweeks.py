"""
Live gameweek endpoint for the Fantasy Premier League API.
"""

from ..http import FplHTTP
from ..models.live import LiveGameweek


class GameweeksAPI:
    """API wrapper for live gameweek data."""

    def __init__(self, http_client: FplHTTP):
        self.http = http_client

    def get_live_gameweek(self, gameweek_id: int) -> LiveGameweek:
        """Live statistics of every player in a gameweek, never cached."""
        return self.http.fetch(f"event/{gameweek_id}/live/", LiveGameweek)
