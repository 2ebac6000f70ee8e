"""Configuration loaded from environment variables."""

import os


def _get_env_int(key: str, default: str) -> int:
    """Get integer environment variable with validation."""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        raise ValueError(f"Invalid integer value for {key}")


def _get_env_float(key: str, default: str) -> float:
    """Get float environment variable with validation."""
    try:
        return float(os.getenv(key, default))
    except ValueError:
        raise ValueError(f"Invalid float value for {key}")


class Config:
    """Centralized configuration from environment variables."""

    # Remote range service
    BREACH_API_BASE_URL: str = os.getenv("BREACH_API_BASE_URL", "https://api.pwnedpasswords.com")
    BREACH_USER_AGENT: str = os.getenv("BREACH_USER_AGENT", "passcheck-hibp/1.0")

    # Timeouts
    BREACH_REQUEST_TIMEOUT: float = _get_env_float("BREACH_REQUEST_TIMEOUT", "10.0")

    # Range cache: "memory" or "none" (every lookup hits the network)
    BREACH_CACHE_BACKEND: str = os.getenv("BREACH_CACHE_BACKEND", "none")

    # Max cached prefixes; 0 or negative means unbounded (TTL still applies)
    BREACH_CACHE_MAX_ENTRIES: int = _get_env_int("BREACH_CACHE_MAX_ENTRIES", "1024")

    # Seconds a cached range response stays fresh
    BREACH_CACHE_TTL: float = _get_env_float("BREACH_CACHE_TTL", "300.0")

    # Minimum occurrence count before a breach is reported as an issue
    BREACH_MIN_OCCURRENCES: int = _get_env_int("BREACH_MIN_OCCURRENCES", "1")


config = Config()
