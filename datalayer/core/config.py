"""
Data layer configuration with environment-specific secrets management.

Supported environment files (loaded in order of precedence):
1. .env.{ENVIRONMENT} (e.g., .env.production, .env.development)
2. .env (fallback)

Provider credentials:
- API_SPORTS_KEY (soccer, basketball, hockey, american football)
- THE_ODDS_API_KEY (betting odds)

A missing credential never stops the process; the sports it serves are
reported as unavailable instead.
"""
import os
import logging
from pathlib import Path
from typing import Literal
from pydantic_settings import BaseSettings
from pydantic import ConfigDict

# Get the project root directory (3 levels up from this file)
PROJECT_ROOT = Path(__file__).parent.parent.parent

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Data layer settings with environment-specific configuration."""

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    model_config = ConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"  # Allow extra fields from .env
    )

    # Application
    APP_NAME: str = "Sports Data Layer"
    APP_VERSION: str = "1.0.0"

    # API-Sports (soccer, basketball, hockey, american football)
    API_SPORTS_KEY: str = ""
    API_SPORTS_TIMEOUT: float = 30.0  # seconds

    # The Odds API
    THE_ODDS_API_KEY: str = ""
    ODDS_API_REGIONS: str = "us"  # us, uk, eu, au
    ODDS_API_CACHE_TTL: int = 120  # 2 minutes, odds move quickly

    # ESPN (gridiron injuries)
    ESPN_CACHE_TTL: int = 600  # 10 minutes

    # Orchestrator cache
    DATA_LAYER_CACHE_TTL_MINUTES: int = 5
    DATA_LAYER_ENABLE_CACHING: bool = True

    # Verification overlay caches
    IDENTITY_CACHE_TTL_DAYS: int = 1
    STATS_CACHE_TTL_HOURS: int = 1

    # Matching and quality policy
    FUZZY_MATCH_THRESHOLD: int = 70  # 0-100 similarity
    SAME_TEAM_THRESHOLD: int = 80  # 0-100 similarity
    HIGH_QUALITY_MIN_FORM: int = 3  # form entries per side for HIGH grade

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT == "development"

    def validate_required_secrets(self) -> list[str]:
        """
        Report provider credentials that are not set.

        Returns:
            List of missing secret names (empty if all present)
        """
        missing = []

        if not self.API_SPORTS_KEY:
            missing.append("API_SPORTS_KEY")

        if not self.THE_ODDS_API_KEY:
            missing.append("THE_ODDS_API_KEY")

        return missing

    def get_cache_ttl_seconds(self) -> int:
        """Default orchestrator cache TTL in seconds."""
        return self.DATA_LAYER_CACHE_TTL_MINUTES * 60

    def get_identity_ttl_seconds(self) -> int:
        """TTL for resolved team identities in seconds."""
        return self.IDENTITY_CACHE_TTL_DAYS * 86400

    def get_stats_ttl_seconds(self) -> int:
        """TTL for numeric stat snapshots in seconds."""
        return self.STATS_CACHE_TTL_HOURS * 3600


def _load_env_file() -> Path:
    """
    Load the appropriate environment file based on ENVIRONMENT variable.

    Loads in order of precedence:
    1. .env.{ENVIRONMENT} (e.g., .env.production, .env.development)
    2. .env (fallback)
    """
    environment = os.getenv("ENVIRONMENT", "development")

    env_file = PROJECT_ROOT / f".env.{environment}"
    if env_file.exists():
        logger.info(f"Loading environment from {env_file.name}")
        return env_file

    default_env = PROJECT_ROOT / ".env"
    if default_env.exists():
        logger.info(f"Loading environment from .env (environment: {environment})")
        return default_env

    logger.debug(f"No environment file found for '{environment}' (checked .env.{environment}, .env)")
    return default_env


# Auto-detect and load environment file
_env_file = _load_env_file()


class _SettingsWithEnvFile(Settings):
    model_config = ConfigDict(
        env_file=str(_env_file),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


settings = _SettingsWithEnvFile()

# Missing credentials degrade sports to unavailable, they are never fatal
missing_secrets = settings.validate_required_secrets()
if missing_secrets:
    logger.warning(
        f"Missing provider credentials for {settings.ENVIRONMENT}: {', '.join(missing_secrets)} "
        f"- affected sports will report as unavailable"
    )
