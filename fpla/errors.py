"""
Exceptions raised by the Fantasy Premier League API client.

Fetch failures are classified in priority order: the request never got a
response (TransportError), the response was not 200 OK (StatusError), or
the body did not decode into the expected shape (DecodeError). Lookups by
id that find nothing return None rather than raising.
"""

from typing import Optional


class FplError(Exception):
    """Base class for every failure surfaced by the client."""

    def __init__(
        self, message: str, endpoint: Optional[str] = None, cause: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.endpoint = endpoint
        self.cause = cause

    def __str__(self) -> str:
        return f"FplError: {self.message}"


def _request_failed(endpoint: str) -> str:
    return f"Failed when making request to: {endpoint}"


class TransportError(FplError):
    """The request could not be sent or no response was received."""

    def __init__(self, endpoint: str, cause: str):
        super().__init__(
            f"{_request_failed(endpoint)} with this error: {cause}",
            endpoint=endpoint,
            cause=cause,
        )


class StatusError(FplError):
    """A response arrived with a status code other than 200 OK."""

    def __init__(self, endpoint: str, status_code: int):
        super().__init__(
            f"{_request_failed(endpoint)} with this status code: {status_code}",
            endpoint=endpoint,
        )
        self.status_code = status_code


class DecodeError(FplError):
    """The body of a 200 response did not match the expected shape."""

    def __init__(self, endpoint: str, cause: str):
        super().__init__(
            f"{_request_failed(endpoint)} with this error: {cause}",
            endpoint=endpoint,
            cause=cause,
        )


class FixtureError(FplError):
    """Base class for failures while resolving a single fixture."""

    def __init__(self, message: str, fixture_id: int, endpoint: Optional[str] = None):
        super().__init__(message, endpoint=endpoint)
        self.fixture_id = fixture_id


class UnresolvedGameweekError(FixtureError):
    """The fixture is missing from the full list or has no gameweek yet."""

    def __init__(self, fixture_id: int, endpoint: Optional[str] = None):
        super().__init__(
            f"Fixture {fixture_id} cannot be scoped to a gameweek",
            fixture_id=fixture_id,
            endpoint=endpoint,
        )


class FixtureVanishedError(FixtureError):
    """The fixture is listed overall but absent from its own gameweek's list."""

    def __init__(self, fixture_id: int, gameweek_id: int, endpoint: Optional[str] = None):
        super().__init__(
            f"Fixture {fixture_id} is missing from the fixtures of gameweek {gameweek_id}",
            fixture_id=fixture_id,
            endpoint=endpoint,
        )
        self.gameweek_id = gameweek_id
