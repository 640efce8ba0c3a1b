"""Configuration management using Pydantic settings."""

from datetime import datetime
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# FEC data availability constants
FEC_DATA_START_YEAR = 1980  # FEC electronic data begins in 1980

# Base URL for FEC bulk data
FEC_BULK_DATA_URL = "https://www.fec.gov/files/bulk-downloads/"


def get_current_cycle() -> int:
    """
    Get the current election cycle (current or next even year).

    Returns:
        Current election cycle year
    """
    current_year = datetime.now().year
    if current_year % 2 == 0:
        return current_year
    return current_year + 1


def get_max_cycle() -> int:
    """
    Get maximum allowed election cycle (4 years beyond current cycle).

    Returns:
        Maximum election cycle year
    """
    return get_current_cycle() + 4


class ElectionCycle(int):
    """
    Validated election cycle (two-year period ending in even year).

    FEC uses two-year cycles ending in even years (e.g., 2006 covers 2005-2006).
    """

    @classmethod
    def validate(cls, v: int) -> int:
        """Validate election cycle is an even year within valid range."""
        if not isinstance(v, int) or isinstance(v, bool):
            raise ValueError("Election cycle must be an integer")

        if v < FEC_DATA_START_YEAR:
            raise ValueError(
                f"Election cycle must be {FEC_DATA_START_YEAR} or later "
                f"(FEC electronic data starts in {FEC_DATA_START_YEAR})"
            )

        max_cycle = get_max_cycle()
        if v > max_cycle:
            raise ValueError(
                f"Election cycle must be {max_cycle} or earlier " f"(current cycle + 4 years)"
            )

        if v % 2 != 0:
            raise ValueError(
                f"Election cycle must be an even year (e.g., 2006, 2024). "
                f"Got {v}. Did you mean {v + 1}?"
            )

        return v


# Find project root (where .env should be)
PROJECT_ROOT = Path(__file__).parent.parent


class Settings(BaseSettings):
    """Report settings loaded from environment variables."""

    # Source data
    election_cycle: int = 2006
    fec_bulk_base_url: str = FEC_BULK_DATA_URL

    # Report parameters
    employer_filter: str = "HARVARD UNIVERSITY"
    top_n_parties: int = 5
    output_dir: Path = Path("reports")

    # Parsing / transport
    chunksize: int = 100_000
    request_timeout: int = 60

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),  # Explicit path to .env
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("election_cycle")
    @classmethod
    def _check_cycle(cls, v: int) -> int:
        return ElectionCycle.validate(v)


# noinspection PyArgumentList
@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()  # type: ignore


def validate_election_cycle(cycle: int) -> int:
    """
    Validate and return election cycle.

    Args:
        cycle: Election cycle year

    Returns:
        Validated cycle year

    Raises:
        ValueError: If cycle is invalid
    """
    return ElectionCycle.validate(cycle)
