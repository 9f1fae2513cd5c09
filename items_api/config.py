"""
Items API — Application Configuration
======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the application factory, the database probe and `run()`.
When:  Loaded once at module import time; tests build their own Settings.

Every value is optional. Leaving MYSQL_HOST empty disables the startup
database probe entirely.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern. Environment variable names are the
    upper-cased field names (MYSQL_HOST, PORT, LOG_LEVEL, ...).
    """

    # ── Database probe ────────────────────────────────────────────────────
    # Connection parameters for the startup reachability check only.
    # Items are never persisted to the database.
    mysql_host: str = Field(default="", description="Database host; empty disables the probe")
    mysql_port: Optional[int] = Field(default=None, ge=1, le=65535)
    mysql_user: str = Field(default="")
    mysql_password: str = Field(default="")
    mysql_database: str = Field(default="")

    # SQLAlchemy async dialect+driver used to build the connection URL
    db_driver: str = Field(default="mysql+aiomysql")

    # Upper bound on how long startup waits for the probe, in seconds
    db_probe_timeout: float = Field(default=5.0, gt=0)

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    # ── Item store ────────────────────────────────────────────────────────
    # Seed the default store with a single demo record {"id": 1, "name": "item-1"}
    seed_demo_item: bool = Field(default=True)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @property
    def database_probe_enabled(self) -> bool:
        """The probe only runs when a database host is configured."""
        return bool(self.mysql_host)


settings = Settings()
