"""Tests for domain models and errors."""

import dataclasses
import pytest
from pydantic import ValidationError
from shared.domain.models import RangeEntry, CacheEntry, CacheStats, BreachResult, BreachIssue
from shared.domain.errors import BreachCheckError, HashFormatError, NetworkError, RemoteError
from shared.domain.consts import IssueCode, IssueCategory, IssueSeverity


class TestBreachResult:
    """Tests for BreachResult model."""

    def test_valid_result(self):
        """Test creating a valid result."""
        result = BreachResult(breached=True, count=3)
        assert result.breached is True
        assert result.count == 3

    def test_count_defaults_to_zero(self):
        """Test default count."""
        assert BreachResult(breached=False).count == 0

    def test_negative_count_rejected(self):
        """Test that count must be >= 0."""
        with pytest.raises(ValidationError):
            BreachResult(breached=True, count=-1)

    def test_results_compare_by_value(self):
        """Test equality."""
        assert BreachResult(breached=True, count=3) == BreachResult(breached=True, count=3)
        assert BreachResult(breached=True, count=3) != BreachResult(breached=True, count=4)

    def test_result_is_frozen(self):
        """Test that results cannot be mutated after creation."""
        result = BreachResult(breached=False, count=0)
        with pytest.raises(ValidationError):
            result.count = 5

    def test_from_json(self):
        """Test validating a precomputed result from JSON."""
        result = BreachResult.model_validate_json('{"breached": true, "count": 12}')
        assert result == BreachResult(breached=True, count=12)


class TestBreachIssue:
    """Tests for BreachIssue model."""

    def test_defaults(self):
        """Test default code, category and severity."""
        issue = BreachIssue(message="breached", count=2)
        assert issue.code == IssueCode.HIBP_BREACHED
        assert issue.category == IssueCategory.BREACH
        assert issue.severity == IssueSeverity.HIGH

    def test_serialization(self):
        """Test model_dump output."""
        data = BreachIssue(message="breached", count=2).model_dump(mode="json")
        assert data == {
            "code": "HIBP_BREACHED",
            "message": "breached",
            "category": "breach",
            "severity": "high",
            "count": 2,
        }


class TestDataclasses:
    """Tests for internal value objects."""

    def test_range_entry_is_frozen(self):
        """Test that range entries are immutable."""
        entry = RangeEntry(suffix="abc", count=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.count = 2

    def test_cache_entry_expiry(self):
        """Test CacheEntry.is_expired boundary."""
        entry = CacheEntry(value="body", expires_at=100.0)
        assert entry.is_expired(99.9) is False
        assert entry.is_expired(100.0) is False
        assert entry.is_expired(100.1) is True

    def test_cache_stats_hit_rate(self):
        """Test hit rate with and without lookups."""
        assert CacheStats().hit_rate == 0.0
        assert CacheStats(hits=3, misses=1).hit_rate == 0.75


class TestErrors:
    """Tests for the error taxonomy."""

    def test_hierarchy(self):
        """Test that every error is a BreachCheckError."""
        assert issubclass(HashFormatError, BreachCheckError)
        assert issubclass(HashFormatError, ValueError)
        assert issubclass(NetworkError, BreachCheckError)
        assert issubclass(RemoteError, BreachCheckError)

    def test_remote_error_carries_status(self):
        """Test RemoteError attributes and message."""
        error = RemoteError(429, "Too Many Requests")
        assert error.status_code == 429
        assert error.reason == "Too Many Requests"
        assert "429" in str(error)
        assert "Too Many Requests" in str(error)

    def test_remote_error_without_reason(self):
        """Test RemoteError message without reason phrase."""
        assert str(RemoteError(503)) == "Range service returned HTTP 503"
