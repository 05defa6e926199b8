"""
Fantasy Premier League API client

A typed Python client for the read-only Fantasy Premier League API. Wraps
the public JSON endpoints in pydantic models, memoizes the static reference
snapshot per client, and resolves single fixtures by id.
"""

__version__ = "0.1.0"

from .client import FplClient
from .config import Settings
from .errors import (
    DecodeError,
    FixtureError,
    FixtureVanishedError,
    FplError,
    StatusError,
    TransportError,
    UnresolvedGameweekError,
)
from .http import FplHTTP

__all__ = [
    "Settings",
    "FplHTTP",
    "FplClient",
    "FplError",
    "TransportError",
    "StatusError",
    "DecodeError",
    "FixtureError",
    "UnresolvedGameweekError",
    "FixtureVanishedError",
]
