"""k-anonymity breach lookup client."""

import logging
from typing import Optional
import httpx
from shared.domain.models import BreachResult
from shared.interfaces.breach_checker import BreachChecker
from shared.interfaces.range_cache import RangeCache
from breach.hashing import sha1_hex, split_hash
from breach.infrastructure.range_fetcher import RangeFetcher
from breach.services.range_parser import find_suffix

logger = logging.getLogger(__name__)

NOT_BREACHED = BreachResult(breached=False, count=0)


class BreachClient(BreachChecker):
    """
    Checks passwords against the breach range service.

    Only the first 5 hex characters of the SHA-1 hash leave the process.
    The password, the full hash and the suffix are never sent or logged.

    Errors are raised, not swallowed: callers that want "no information"
    on failure should go through breach.services.breach_check.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        cache: Optional[RangeCache] = None,
        http_client: Optional[httpx.Client] = None,
        fetcher: Optional[RangeFetcher] = None,
    ) -> None:
        """
        Initialize client.

        Pass a ready fetcher to share one across clients; otherwise one is
        built from the remaining arguments (config defaults for the rest).
        """
        self.fetcher = fetcher if fetcher is not None else RangeFetcher(
            base_url=base_url,
            timeout=timeout,
            user_agent=user_agent,
            cache=cache,
            http_client=http_client,
        )

    def check(self, password: str) -> BreachResult:
        """
        Check a plaintext password.

        The empty password is never hashed or looked up.
        """
        if password == "":
            return NOT_BREACHED
        return self.check_hash(sha1_hex(password))

    def check_hash(self, hash_value: str) -> BreachResult:
        """
        Check a precomputed SHA-1 hex hash (any case, surrounding whitespace ok).

        Raises:
            HashFormatError: If hash_value is not 40 hex characters
            NetworkError: On transport failure
            RemoteError: On non-success status
        """
        prefix, suffix = split_hash(hash_value)
        body = self.fetcher.fetch_range(prefix)

        entry = find_suffix(body, suffix)
        if entry is None:
            logger.debug(f"Range {prefix}: no match")
            return NOT_BREACHED

        logger.debug(f"Range {prefix}: match found")
        return BreachResult(breached=True, count=entry.count)

    def close(self) -> None:
        """Close the underlying fetcher."""
        self.fetcher.close()

    def __enter__(self) -> "BreachClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
