"""Breach infrastructure layer."""

from breach.infrastructure.range_fetcher import RangeFetcher

__all__ = [
    "RangeFetcher",
]
