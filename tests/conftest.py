"""Pytest configuration and fixtures."""

import pytest
from shared.interfaces.range_cache import RangeCache

BASE_URL = "https://range.test"

# SHA-1("password")
PASSWORD = "password"
PASSWORD_HASH = "5baa61e4c9b93f3f0682250b6cf8331b7ee68fd8"
PASSWORD_PREFIX = PASSWORD_HASH[:5]
PASSWORD_SUFFIX = PASSWORD_HASH[5:]


def range_body(*lines: str, newline: str = "\r\n") -> str:
    """Join SUFFIX:COUNT lines the way the range service does."""
    return newline.join(lines) + newline


@pytest.fixture
def base_url():
    """Base URL of the stubbed range service."""
    return BASE_URL


@pytest.fixture
def password():
    """Sample password known to be breached."""
    return PASSWORD


@pytest.fixture
def password_hash():
    """SHA-1 hex of the sample password."""
    return PASSWORD_HASH


@pytest.fixture
def password_prefix():
    """Disclosed 5-character prefix of the sample hash."""
    return PASSWORD_PREFIX


@pytest.fixture
def password_suffix():
    """Withheld 35-character suffix of the sample hash."""
    return PASSWORD_SUFFIX


@pytest.fixture
def breached_body():
    """Range body for the sample prefix that contains the sample suffix."""
    return range_body(
        "003D68EB55068C33ACE09247EE4C639306B:3",
        f"{PASSWORD_SUFFIX.upper()}:10434004",
        "FFF0A1E1B1C8D2B8C4E4C2A7F5D1D6E3B0C:2",
    )


@pytest.fixture
def clean_body():
    """Range body for the sample prefix without the sample suffix."""
    return range_body(
        "003D68EB55068C33ACE09247EE4C639306B:3",
        "012C192B2F16F82EA0EB9EF18D9D539B0DD:1",
    )


class RecordingCache(RangeCache):
    """Plain dict cache that records every call."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.calls: list[tuple] = []

    def get(self, key):
        self.calls.append(("get", key))
        return self.data.get(key)

    def set(self, key, value, ttl):
        self.calls.append(("set", key, ttl))
        self.data[key] = value


@pytest.fixture
def recording_cache():
    """Cache double that records get/set calls."""
    return RecordingCache()
