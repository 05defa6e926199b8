"""
Fixture endpoints for the Fantasy Premier League API.

Upstream has no "one fixture by id" endpoint, only the full fixture list
and the list for one gameweek. FixtureResolver bridges that in three steps:

1. All fixtures: find the fixture and read its gameweek.
2. Gameweek fixtures: re-fetch the fixtures of that gameweek.
3. Resolve: return the fixture from the gameweek list.

A fixture missing from step 1 or lacking a gameweek raises
UnresolvedGameweekError. A fixture found in step 1 but missing in step 2
raises FixtureVanishedError. Fetch failures from either step propagate
unchanged.
"""

import logging
from typing import Optional

from ..errors import FixtureVanishedError, UnresolvedGameweekError
from ..http import FplHTTP
from ..models.fixture import Fixture, Fixtures

logger = logging.getLogger(__name__)

FIXTURES_PATH = "fixtures/"


def _matching(fixtures: Fixtures, fixture_id: int) -> Fixtures:
    return [fixture for fixture in fixtures if fixture.id == fixture_id]


class FixturesAPI:
    """API wrapper for fixture endpoints."""

    def __init__(self, http_client: FplHTTP):
        self.http = http_client

    def get_fixtures(self) -> Fixtures:
        """Every fixture of the season, scheduled or not."""
        return self.http.fetch(FIXTURES_PATH, Fixtures)

    def get_gameweek_fixtures(self, gameweek_id: int) -> Fixtures:
        """
        Get the fixtures of one gameweek.

        Args:
            gameweek_id: Gameweek ID

        Returns:
            Fixtures scheduled in that gameweek
        """
        return self.http.fetch(
            FIXTURES_PATH, Fixtures, params={"event": gameweek_id}
        )

    def get_fixture(self, fixture_id: int) -> Fixture:
        """
        Get one fixture by id.

        Args:
            fixture_id: Fixture ID

        Returns:
            The fixture as listed for its gameweek

        Raises:
            UnresolvedGameweekError: unknown fixture, or not yet in a gameweek
            FixtureVanishedError: missing from its own gameweek's fixtures
        """
        return FixtureResolver(self).resolve(fixture_id)


class FixtureResolver:
    """Locate one fixture through the all-fixtures and gameweek endpoints."""

    def __init__(self, fixtures_api: FixturesAPI):
        self.fixtures = fixtures_api

    def resolve(self, fixture_id: int) -> Fixture:
        gameweek_id = self.locate_gameweek(fixture_id)
        candidates = self.gameweek_candidates(fixture_id, gameweek_id)
        return self.pick(fixture_id, gameweek_id, candidates)

    def locate_gameweek(self, fixture_id: int) -> int:
        """Step 1: gameweek of the fixture according to the full list."""
        listed = _matching(self.fixtures.get_fixtures(), fixture_id)
        gameweek_id: Optional[int] = listed[0].event if listed else None

        if gameweek_id is None:
            logger.debug("Fixture %s has no gameweek to scope it to", fixture_id)
            raise UnresolvedGameweekError(
                fixture_id, endpoint=self.fixtures.http.endpoint(FIXTURES_PATH)
            )

        return gameweek_id

    def gameweek_candidates(self, fixture_id: int, gameweek_id: int) -> Fixtures:
        """Step 2: fixtures with this id in the gameweek's own list."""
        return _matching(self.fixtures.get_gameweek_fixtures(gameweek_id), fixture_id)

    def pick(
        self, fixture_id: int, gameweek_id: int, candidates: Fixtures
    ) -> Fixture:
        """Step 3: the single fixture, or a vanished-fixture failure."""
        if not candidates:
            logger.warning(
                "Fixture %s listed overall but absent from gameweek %s",
                fixture_id,
                gameweek_id,
            )
            raise FixtureVanishedError(
                fixture_id,
                gameweek_id,
                endpoint=self.fixtures.http.endpoint(
                    FIXTURES_PATH, {"event": gameweek_id}
                ),
            )

        if len(candidates) > 1:
            logger.warning(
                "Gameweek %s lists fixture %s %d times; using the first",
                gameweek_id,
                fixture_id,
                len(candidates),
            )

        return candidates[0]
