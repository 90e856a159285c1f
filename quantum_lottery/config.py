"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # "qrng" | "system"
    RANDOM_SOURCE: str = os.getenv("RANDOM_SOURCE", "qrng").lower().strip()

    # ANU quantum random numbers (JSON API)
    QRNG_URL: str = os.getenv("QRNG_URL", "https://qrng.anu.edu.au/API/jsonI.php")
    QRNG_API_KEY: str | None = os.getenv("QRNG_API_KEY") or None
    QRNG_TIMEOUT: float = _env_float("QRNG_TIMEOUT", 10.0)
    QRNG_RETRIES: int = _env_int("QRNG_RETRIES", 0)
    QRNG_BACKOFF: float = _env_float("QRNG_BACKOFF", 0.3)

    DEFAULT_BALL_COUNT: int = _env_int("DEFAULT_BALL_COUNT", 6)
    DEFAULT_MAX_NUMBER: int = _env_int("DEFAULT_MAX_NUMBER", 59)
    # Unranking scans up to max_number per ball; keep requests bounded.
    MAX_NUMBER_LIMIT: int = _env_int("MAX_NUMBER_LIMIT", 1000)


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


@dataclass(frozen=True)
class TestingConfig(BaseConfig):
    """Test configuration; never touches the network."""

    DEBUG: bool = False
    TESTING: bool = True
    RANDOM_SOURCE: str = "system"


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
