"""Breach evaluation for the strength scoring layer, with graceful degradation."""

import logging
from dataclasses import dataclass, field
from typing import Optional
from shared.config.config import config
from shared.domain.errors import BreachCheckError
from shared.domain.models import BreachResult, BreachIssue
from shared.interfaces.breach_checker import BreachChecker

logger = logging.getLogger(__name__)

BREACHED_MESSAGE = "Password has been found in a data breach."


@dataclass
class BreachCheckOptions:
    """Options for breach evaluation."""
    checker: Optional[BreachChecker] = None
    min_occurrences: int = field(default_factory=lambda: config.BREACH_MIN_OCCURRENCES)
    result: Optional[BreachResult] = None  # precomputed, e.g. from a browser-side lookup


def lookup_breach(password: str, options: BreachCheckOptions) -> BreachResult:
    """
    Resolve a breach result for password.

    A precomputed result wins over the checker. Lookup failures are logged
    and treated as "not found" so the surrounding analysis can continue.
    """
    if options.result is not None:
        return options.result

    if options.checker is None:
        return BreachResult(breached=False, count=0)

    try:
        return options.checker.check(password)
    except BreachCheckError as e:
        logger.warning(f"Breach lookup unavailable, continuing without it: {e}")
        return BreachResult(breached=False, count=0)


def evaluate_breach(password: str, options: BreachCheckOptions) -> list[BreachIssue]:
    """
    Evaluate password against the breach corpus.

    Returns:
        A single HIBP_BREACHED issue if the password was seen at least
        min_occurrences times (never less than 1), otherwise an empty list.
    """
    result = lookup_breach(password, options)

    min_occurrences = max(options.min_occurrences, 1)
    if result.breached and result.count >= min_occurrences:
        return [BreachIssue(message=BREACHED_MESSAGE, count=result.count)]

    return []
