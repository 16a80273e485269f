"""
Configuration settings for the User Records Backend
"""

import os
import logging
from dataclasses import dataclass
from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Immutable process configuration, built once at startup"""
    postgres_url: str
    host: str = "0.0.0.0"
    port: int = 8080
    db_pool_min_size: int = 2
    db_pool_max_size: int = 10
    db_command_timeout: float = 60
    log_level: str = "INFO"


def load_settings(env_file: str = ".env") -> Settings:
    """
    Load settings from the environment, optionally seeded from a .env file

    Args:
        env_file: Path of the environment file to load (missing file is ignored)

    Returns:
        Settings instance

    Raises:
        ValueError: If POSTGRES_URL is not set
    """
    if not load_dotenv(env_file):
        logger.info(f"No environment file loaded from {env_file}")

    postgres_url = os.getenv("POSTGRES_URL")

    # Validate required environment variables
    if not postgres_url:
        raise ValueError("POSTGRES_URL environment variable is required")

    settings = Settings(
        postgres_url=postgres_url,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", 8080)),
        db_pool_min_size=int(os.getenv("DB_POOL_MIN_SIZE", 2)),
        db_pool_max_size=int(os.getenv("DB_POOL_MAX_SIZE", 10)),
        db_command_timeout=float(os.getenv("DB_COMMAND_TIMEOUT", 60)),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )

    logger.info(f"Settings loaded - port: {settings.port}, pool size: {settings.db_pool_min_size}-{settings.db_pool_max_size}")
    return settings
