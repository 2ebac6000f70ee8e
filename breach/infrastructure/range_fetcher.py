"""HTTP client for fetching hash ranges from the breach range service."""

import logging
from typing import Optional
import httpx
from shared.config.config import config
from shared.domain.consts import RangeQuery
from shared.domain.errors import NetworkError, RemoteError
from shared.interfaces.range_cache import RangeCache
from breach.hashing import normalize_prefix

logger = logging.getLogger(__name__)


class RangeFetcher:
    """
    HTTP client for range lookups.

    Fetches every known suffix sharing a 5-character prefix. Consults the
    optional cache first and stores successful bodies in it. Makes exactly
    one request per miss; there is no retry.

    Thread-safety: holds no mutable state besides the (thread-safe) cache
    and httpx.Client, so one fetcher can be shared across threads.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        cache: Optional[RangeCache] = None,
        cache_ttl: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Initialize range fetcher.

        Unset arguments fall back to config. When http_client is given the
        fetcher uses it as-is and does not close it.
        """
        self.base_url: str = (base_url or config.BREACH_API_BASE_URL).rstrip("/")
        self.timeout: float = timeout if timeout is not None else config.BREACH_REQUEST_TIMEOUT
        self.user_agent: str = user_agent if user_agent is not None else config.BREACH_USER_AGENT
        self.cache: Optional[RangeCache] = cache
        self.cache_ttl: float = cache_ttl if cache_ttl is not None else config.BREACH_CACHE_TTL
        self._owns_client = http_client is None
        self.client = http_client if http_client is not None else httpx.Client(timeout=self.timeout)

    def range_url(self, prefix: str) -> str:
        """Build the range URL for a normalized prefix."""
        return f"{self.base_url}{RangeQuery.PATH}/{prefix}"

    def fetch_range(self, prefix: str) -> str:
        """
        Fetch the raw range body for prefix.

        Returns:
            Response body text (cached or freshly fetched)

        Raises:
            HashFormatError: If prefix is not 5 hex characters
            NetworkError: On timeout, connection, DNS or body decoding failure
            RemoteError: If the service answered with a non-2xx status
        """
        prefix = normalize_prefix(prefix)

        if self.cache is not None:
            cached = self.cache.get(prefix)
            if cached is not None:
                logger.debug(f"Range {prefix}: cache hit")
                return cached

        url = self.range_url(prefix)
        headers = {"User-Agent": self.user_agent} if self.user_agent else {}

        try:
            logger.debug(f"Range {prefix}: fetching {url}")
            response = self.client.get(url, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Range {prefix}: HTTP error talking to {self.base_url}: {e}")
            raise NetworkError(f"Range request for {prefix} failed: {e}") from e

        if not response.is_success:
            logger.error(
                f"Range {prefix}: service returned HTTP {response.status_code}"
            )
            raise RemoteError(response.status_code, response.reason_phrase)

        body = response.text

        if self.cache is not None:
            self.cache.set(prefix, body, self.cache_ttl)

        logger.debug(f"Range {prefix}: fetched {len(body)} bytes")
        return body

    def close(self) -> None:
        """
        Close HTTP client and cleanup resources.

        Injected clients are left open for their owner to close.
        """
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "RangeFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
