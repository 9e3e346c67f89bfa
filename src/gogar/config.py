"""
Application configuration using pydantic-settings.

Loads configuration from environment variables (prefix ``GOGAR_``) and .env files.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# (premises, conclusion) pairs
RuleSpec = tuple[list[str], str]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GOGAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Agents
    default_intelligence: int = Field(
        default=100,
        ge=0,
        description="Reasoning depth given to new agents",
    )
    default_committive_inferences: list[RuleSpec] = Field(
        default=[
            (["A is red"], "A is colored"),
            (["A is blue"], "A is colored"),
            (["A is green"], "A is colored"),
        ],
        description="Committive inferences every new agent starts with",
    )
    default_permissive_inferences: list[RuleSpec] = Field(
        default=[
            (["A is red", "A is fragrant"], "A is edible"),
            (["A is blue", "A is small"], "A is poisonous"),
        ],
        description="Permissive inferences every new agent starts with",
    )
    default_incompatibilities: list[list[str]] = Field(
        default=[
            ["A is red", "A is blue"],
            ["A is red", "A is green"],
            ["A is blue", "A is green"],
            ["A is edible", "A is poisonous"],
        ],
        description="Incompatibility sets every new agent starts with",
    )
    seed_agents: list[str] = Field(
        default=["Ann", "Bob"],
        description="Agents added by 'new game'",
    )

    # Rendering
    wrap_width: int = Field(
        default=78,
        ge=20,
        description="Column at which score and agent listings are wrapped",
    )

    # Persistence
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data/gogar.db",
        description="SQLAlchemy async connection string for web sessions",
    )

    # Web front end
    web_host: str = Field(default="127.0.0.1", description="Host the web front end binds to")
    web_port: int = Field(default=9094, description="Port the web front end listens on")

    # Application
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (DEBUG logging, tracebacks in web error pages)",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings: Application settings instance.
    """
    return Settings()
