"""Constants to avoid string typos and magic numbers."""

from enum import Enum


class HashAlgorithm:
    """Hash algorithm constants."""
    SHA1 = "sha1"

    # Hash length constants
    SHA1_LENGTH = 40  # SHA-1 hash is 40 hex characters


class RangeQuery:
    """k-anonymity range query constants."""
    PREFIX_LENGTH = 5  # Hex characters disclosed to the range service
    PATH = "/range"
    LINE_SEPARATOR = ":"


class CacheDefaults:
    """Defaults for the bundled in-memory range cache."""
    MAX_ENTRIES = 1024
    TTL_SECONDS = 300.0  # 5 minutes


class CacheBackend(str, Enum):
    """Range cache backend names."""
    MEMORY = "memory"
    NONE = "none"


class IssueCode:
    """Issue codes reported to the scoring layer."""
    HIBP_BREACHED = "HIBP_BREACHED"


class IssueCategory:
    """Issue category strings."""
    BREACH = "breach"


class IssueSeverity(str, Enum):
    """Issue severity levels."""
    HIGH = "high"
