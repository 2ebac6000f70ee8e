"""Breach lookup services."""

from breach.services.breach_client import BreachClient
from breach.services.mock_client import MockBreachClient
from breach.services.breach_check import BreachCheckOptions, lookup_breach, evaluate_breach
from breach.services.range_parser import parse_range_line, parse_range_body, find_suffix

__all__ = [
    "BreachClient",
    "MockBreachClient",
    "BreachCheckOptions",
    "lookup_breach",
    "evaluate_breach",
    "parse_range_line",
    "parse_range_body",
    "find_suffix",
]
