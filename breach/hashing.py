"""SHA-1 hashing and k-anonymity prefix/suffix splitting."""

import hashlib
import re
from shared.domain.consts import HashAlgorithm, RangeQuery
from shared.domain.errors import HashFormatError

_SHA1_PATTERN = re.compile(f"^[0-9a-f]{{{HashAlgorithm.SHA1_LENGTH}}}$")
_PREFIX_PATTERN = re.compile(f"^[0-9a-f]{{{RangeQuery.PREFIX_LENGTH}}}$")


def sha1_hex(secret: str) -> str:
    """Return the lowercase hex SHA-1 of the UTF-8 encoded secret."""
    return hashlib.new(HashAlgorithm.SHA1, secret.encode("utf-8")).hexdigest()


def is_valid_sha1_hash(hash_value: str) -> bool:
    """Validate that hash is exactly 40 hex characters (case-insensitive)."""
    return bool(_SHA1_PATTERN.match(hash_value.strip().lower()))


def normalize_hash(hash_value: str) -> str:
    """
    Trim and lowercase a SHA-1 hex hash.

    Raises:
        HashFormatError: If the result is not 40 hex characters
    """
    normalized = hash_value.strip().lower()
    if not _SHA1_PATTERN.match(normalized):
        raise HashFormatError(
            f"Hash must be {HashAlgorithm.SHA1_LENGTH} hex characters, got {len(normalized)}"
        )
    return normalized


def normalize_prefix(prefix: str) -> str:
    """
    Trim and lowercase a range prefix.

    Raises:
        HashFormatError: If the result is not 5 hex characters
    """
    normalized = prefix.strip().lower()
    if not _PREFIX_PATTERN.match(normalized):
        raise HashFormatError(
            f"Prefix must be {RangeQuery.PREFIX_LENGTH} hex characters, got {len(normalized)}"
        )
    return normalized


def split_hash(hash_value: str) -> tuple[str, str]:
    """
    Split a SHA-1 hex hash into (prefix, suffix).

    Only the prefix is ever sent over the network; the suffix is compared
    locally.

    Raises:
        HashFormatError: If hash_value is not 40 hex characters
    """
    normalized = normalize_hash(hash_value)
    return normalized[:RangeQuery.PREFIX_LENGTH], normalized[RangeQuery.PREFIX_LENGTH:]
