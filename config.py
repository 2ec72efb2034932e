"""
Mock API server configuration module.

This module defines configuration classes for different environments
(development, testing, production). Configuration values are loaded
from environment variables with sensible defaults.
"""

import os


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back on bad input."""
    try:
        return int(os.environ.get(name, default))
    except (TypeError, ValueError):
        return default


def _env_float(name: str, default: float) -> float:
    """Read a float environment variable, falling back on bad input."""
    try:
        return float(os.environ.get(name, default))
    except (TypeError, ValueError):
        return default


class Config:
    """Base configuration with default settings."""

    SECRET_KEY: str = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")
    PORT: int = _env_int("PORT", 3000)

    # Token signing for /api/auth/login and /api/auth/me
    JWT_SECRET: str = os.environ.get("JWT_SECRET", "loadlab-test-secret-key-for-hs256-signing")
    JWT_EXPIRY_SECONDS: int = _env_int("JWT_EXPIRY_SECONDS", 3600)

    # Latency simulation
    MAX_DELAY_MS: int = _env_int("MAX_DELAY_MS", 10000)
    RANDOM_DELAY_MIN_MS: int = _env_int("RANDOM_DELAY_MIN_MS", 100)
    RANDOM_DELAY_MAX_MS: int = _env_int("RANDOM_DELAY_MAX_MS", 2000)

    # Error injection
    RANDOM_ERROR_RATE: float = _env_float("RANDOM_ERROR_RATE", 0.2)

    # /api/large-payload item counts
    DEFAULT_PAYLOAD_SIZE: int = _env_int("DEFAULT_PAYLOAD_SIZE", 100)
    MAX_PAYLOAD_SIZE: int = _env_int("MAX_PAYLOAD_SIZE", 10000)


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = True
    TESTING: bool = True

    JWT_SECRET: str = os.environ.get("TEST_JWT_SECRET", "loadlab-test-secret-key-for-hs256-signing")


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
