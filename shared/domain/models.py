"""Domain models for range entries, cache entries, and lookup results."""

from dataclasses import dataclass
from pydantic import BaseModel, Field, ConfigDict
from shared.domain.consts import IssueCode, IssueCategory, IssueSeverity


@dataclass(frozen=True)
class RangeEntry:
    """One `SUFFIX:COUNT` line of a range response."""
    suffix: str  # lowercase
    count: int


@dataclass
class CacheEntry:
    """Raw range response body stored for one prefix."""
    value: str
    expires_at: float  # absolute time.time() timestamp

    def is_expired(self, now: float) -> bool:
        """Check if entry is stale at the given time."""
        return now > self.expires_at


@dataclass
class CacheStats:
    """Counters for cache activity."""
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    expirations: int = 0

    @property
    def lookups(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        return self.hits / self.lookups if self.lookups else 0.0


class BreachResult(BaseModel):
    """Outcome of a breach lookup."""
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "breached": True,
                "count": 3861493,
            }
        }
    )

    breached: bool = Field(..., description="True if the full hash appears in the breach corpus")
    count: int = Field(0, ge=0, description="Number of times the hash was observed (0 if not breached)")


class BreachIssue(BaseModel):
    """Issue handed to the strength scoring layer when a password is breached."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "code": IssueCode.HIBP_BREACHED,
                "message": "Password has been found in a data breach.",
                "category": IssueCategory.BREACH,
                "severity": IssueSeverity.HIGH,
                "count": 42,
            }
        }
    )

    code: str = Field(default=IssueCode.HIBP_BREACHED, description="Machine-readable issue code")
    message: str = Field(..., description="Human-readable explanation")
    category: str = Field(default=IssueCategory.BREACH, description="Issue category")
    severity: IssueSeverity = Field(default=IssueSeverity.HIGH, description="Issue severity")
    count: int = Field(0, ge=0, description="Occurrence count reported by the range service")
