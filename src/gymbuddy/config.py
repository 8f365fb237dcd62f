"""Application configuration loaded from environment variables."""

import logging
import sys
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory (next to the source checkout)
DATA_DIR = Path(__file__).parent.parent.parent / "data"
DB_FILENAME = "gymbuddy.db"


class Settings(BaseSettings):
    """Settings read from ``GYMBUDDY_*`` environment variables (or .env file)."""

    model_config = SettingsConfigDict(
        env_prefix="GYMBUDDY_", env_file=".env", env_file_encoding="utf-8"
    )

    # --- Storage ---
    data_dir: Path = DATA_DIR
    database_file: Path | None = None

    # --- Server ---
    host: str = "127.0.0.1"
    port: int = 3000
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]

    # --- Behaviour ---
    default_routine_name: str = "Routine"
    log_level: str = "INFO"

    @property
    def db_path(self) -> Path:
        """Resolved database file path."""
        if self.database_file is not None:
            return self.database_file
        return self.data_dir / DB_FILENAME


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the CLI and the web server."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )
