"""
Transfer models for Fantasy Premier League API responses.
"""

from pydantic import Field

from .common import FplResource


class Transfer(FplResource):
    """One player swapped in a manager's squad."""

    element_in: int = Field(description="Player ID brought in")
    element_in_cost: int = Field(description="Price paid, in tenths")
    element_out: int = Field(description="Player ID sold")
    element_out_cost: int = Field(description="Sale price, in tenths")
    entry: int = Field(description="Manager (entry) ID")
    event: int = Field(description="Gameweek the transfer applies to")
    time: str = Field(description="When the transfer was made (ISO 8601)")


Transfers = list[Transfer]
