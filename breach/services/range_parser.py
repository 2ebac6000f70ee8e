"""Parsing of line-oriented range responses."""

import re
from typing import Iterator, Optional
from shared.domain.consts import RangeQuery
from shared.domain.models import RangeEntry

_COUNT_PATTERN = re.compile(r"^[0-9]+$")


def parse_range_line(line: str) -> Optional[RangeEntry]:
    """
    Parse one `SUFFIX:COUNT` line.

    Returns:
        RangeEntry with lowercase suffix, or None for blank or malformed lines
        (no colon, empty suffix, count not a non-negative decimal integer).
    """
    line = line.strip()
    if not line:
        return None

    suffix_text, separator, count_text = line.partition(RangeQuery.LINE_SEPARATOR)
    suffix = suffix_text.strip().lower()
    if not separator or not suffix:
        return None

    count_text = count_text.strip()
    if not _COUNT_PATTERN.match(count_text):
        return None

    return RangeEntry(suffix=suffix, count=int(count_text))


def parse_range_body(body: str) -> Iterator[RangeEntry]:
    """
    Yield entries from a range response body.

    Lines may end in CRLF or LF. Malformed lines are skipped.
    """
    for line in body.split("\n"):
        entry = parse_range_line(line)
        if entry is not None:
            yield entry


def find_suffix(body: str, suffix: str) -> Optional[RangeEntry]:
    """
    Return the first entry whose suffix matches (case-insensitive), or None.

    Single linear scan; range bodies are a few hundred lines at most.
    """
    target = suffix.strip().lower()
    for entry in parse_range_body(body):
        if entry.suffix == target:
            return entry
    return None
