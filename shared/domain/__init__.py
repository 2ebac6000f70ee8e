"""Domain models and entities."""

from shared.domain.models import RangeEntry, CacheEntry, CacheStats, BreachResult, BreachIssue
from shared.domain.errors import BreachCheckError, HashFormatError, NetworkError, RemoteError
from shared.domain.consts import (
    HashAlgorithm,
    RangeQuery,
    CacheDefaults,
    CacheBackend,
    IssueCode,
    IssueCategory,
    IssueSeverity,
)

__all__ = [
    "RangeEntry",
    "CacheEntry",
    "CacheStats",
    "BreachResult",
    "BreachIssue",
    "BreachCheckError",
    "HashFormatError",
    "NetworkError",
    "RemoteError",
    "HashAlgorithm",
    "RangeQuery",
    "CacheDefaults",
    "CacheBackend",
    "IssueCode",
    "IssueCategory",
    "IssueSeverity",
]
