"""
Tests for fixture endpoints and single fixture resolution.
"""

import httpx
import pytest

from conftest import make_fixture
from fpla.endpoints.fixtures import FixtureResolver
from fpla.errors import (
    FixtureError,
    FixtureVanishedError,
    StatusError,
    TransportError,
    UnresolvedGameweekError,
)


class TestFixtureLists:
    """Test fixture list endpoints."""

    def test_get_fixtures(self, client, upstream):
        """Test the full fixture list."""
        fixtures = client.get_fixtures()

        assert [fixture.id for fixture in fixtures] == [64, 65, 380]
        assert fixtures[2].event is None
        assert fixtures[2].team_h_score is None
        assert fixtures[0].stats[0].h[0].element == 389

    def test_get_gameweek_fixtures(self, client, upstream):
        """Test fixtures scoped to one gameweek."""
        fixtures = client.get_gameweek_fixtures(7)

        assert {fixture.id for fixture in fixtures} == {64, 65}
        assert upstream.calls["fixtures/?event=7"] == 1

    def test_fixtures_not_cached(self, client, upstream):
        """Test fixture lists are fetched on every call."""
        client.get_fixtures()
        client.get_fixtures()

        assert upstream.calls["fixtures/"] == 2


class TestGetFixture:
    """Test single fixture resolution."""

    def test_resolves_fixture(self, client, upstream):
        """Test a fixture present in both lists."""
        fixture = client.get_fixture(65)

        assert fixture.id == 65
        assert fixture.event == 7
        assert fixture.team_h == 14
        assert upstream.calls["fixtures/"] == 1
        assert upstream.calls["fixtures/?event=7"] == 1

    def test_consistent_with_full_list(self, client):
        """Test teams and scores match the full list's representation."""
        listed = next(f for f in client.get_fixtures() if f.id == 64)
        fixture = client.get_fixture(64)

        assert (fixture.team_h, fixture.team_a) == (listed.team_h, listed.team_a)
        assert (fixture.team_h_score, fixture.team_a_score) == (
            listed.team_h_score,
            listed.team_a_score,
        )

    def test_returns_gameweek_representation(self, client, upstream):
        """Test the gameweek list's copy is the one returned."""
        upstream.add(
            "fixtures/?event=7",
            [make_fixture(65, 7, minutes=45, finished=False)],
        )

        fixture = client.get_fixture(65)

        assert fixture.minutes == 45
        assert not fixture.finished

    def test_unscheduled_fixture(self, client, upstream):
        """Test a fixture without a gameweek cannot be resolved."""
        with pytest.raises(UnresolvedGameweekError) as exc_info:
            client.get_fixture(380)

        assert exc_info.value.fixture_id == 380
        assert upstream.calls["fixtures/"] == 1
        assert sum(upstream.calls.values()) == 1

    def test_unknown_fixture(self, client, upstream):
        """Test an unknown id is unresolved, not None."""
        with pytest.raises(UnresolvedGameweekError) as exc_info:
            client.get_fixture(9999)

        assert exc_info.value.endpoint == "https://fpl.test/api/fixtures/"

    def test_vanished_fixture(self, client, upstream):
        """Test a fixture missing from its own gameweek list."""
        upstream.add("fixtures/?event=7", [make_fixture(64, 7, team_h=1, team_a=2)])

        with pytest.raises(FixtureVanishedError) as exc_info:
            client.get_fixture(65)

        error = exc_info.value
        assert error.fixture_id == 65
        assert error.gameweek_id == 7
        assert error.endpoint == "https://fpl.test/api/fixtures/?event=7"

    def test_failures_are_distinguishable(self):
        """Test both resolver failures share a base but differ in kind."""
        assert issubclass(UnresolvedGameweekError, FixtureError)
        assert issubclass(FixtureVanishedError, FixtureError)
        assert not issubclass(UnresolvedGameweekError, FixtureVanishedError)

    def test_duplicate_in_gameweek_uses_first(self, client, upstream):
        """Test duplicates in the gameweek list resolve to the first."""
        upstream.add(
            "fixtures/?event=7",
            [make_fixture(65, 7, minutes=10), make_fixture(65, 7, minutes=20)],
        )

        assert client.get_fixture(65).minutes == 10

    def test_first_step_failure_propagates(self, client, upstream):
        """Test a failed full-list fetch surfaces unchanged."""
        upstream.add("fixtures/", lambda request: httpx.Response(500))

        with pytest.raises(StatusError):
            client.get_fixture(65)

        assert upstream.calls["fixtures/?event=7"] == 0

    def test_second_step_failure_propagates(self, client, upstream):
        """Test a failed gameweek fetch surfaces unchanged."""

        def unreachable(request):
            raise httpx.ConnectError("reset by peer", request=request)

        upstream.add("fixtures/?event=7", unreachable)

        with pytest.raises(TransportError) as exc_info:
            client.get_fixture(65)

        assert exc_info.value.endpoint == "https://fpl.test/api/fixtures/?event=7"


class TestFixtureResolverSteps:
    """Test the resolver's steps individually."""

    def test_locate_gameweek(self, client):
        """Test step 1 finds the gameweek."""
        resolver = FixtureResolver(client.fixtures)

        assert resolver.locate_gameweek(64) == 7

    def test_gameweek_candidates(self, client):
        """Test step 2 filters the gameweek list."""
        resolver = FixtureResolver(client.fixtures)

        assert [f.id for f in resolver.gameweek_candidates(64, 7)] == [64]
        assert resolver.gameweek_candidates(380, 7) == []

    def test_pick_without_candidates(self, client):
        """Test step 3 with nothing to pick."""
        resolver = FixtureResolver(client.fixtures)

        with pytest.raises(FixtureVanishedError):
            resolver.pick(64, 7, [])
