"""
Configuration management for the Fantasy Premier League API client.
"""

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Configuration settings for the Fantasy Premier League API client."""

    base_url: str = Field(
        default="https://fantasy.premierleague.com/api",
        description="Root URL every endpoint path is joined onto",
    )

    timeout: float = Field(
        default=20.0, gt=0, description="Per-request deadline in seconds"
    )

    user_agent: str = Field(
        default="fpla/0.1",
        description="User agent string for API requests",
    )

    max_connections: int = Field(
        default=10, ge=1, description="Connection pool size of the HTTP client"
    )

    class Config:
        env_prefix = "FPL_"
        case_sensitive = False

    def url_for(self, path: str) -> str:
        """Build the absolute URL for an endpoint path."""
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
