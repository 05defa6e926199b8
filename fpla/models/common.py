"""
Common models for Fantasy Premier League API responses.
"""

from pydantic import BaseModel


class FplResource(BaseModel):
    """Base class for Fantasy Premier League API resources."""

    class Config:
        """Pydantic configuration."""

        # Upstream adds fields between seasons; unknown ones are dropped
        extra = "ignore"
        frozen = True
