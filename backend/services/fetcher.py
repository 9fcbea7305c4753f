"""Cached, credentialed GETs against the FotMob API."""

import logging
from typing import Any

import httpx

from errors import UpstreamError
from services.cache import TTLCache
from services.credentials import TOKEN_FIELD, CredentialGate

logger = logging.getLogger(__name__)

UPSTREAM_TIMEOUT_SECONDS = 10.0


class CachingFetcher:
    """Serve decoded FotMob responses by logical key, reusing recent results.

    The key is the request path relative to the API base, query string
    included, e.g. ``leagues?id=47&tab=table&type=league&timeZone=Europe/Paris``.

    Two concurrent misses on the same key both go upstream and the last write
    wins. Only the credential bootstrap is single-flight.
    """

    def __init__(
        self,
        credentials: CredentialGate,
        base_url: str,
        user_agent: str,
        cache: TTLCache | None = None,
        timeout: float = UPSTREAM_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._credentials = credentials
        self._cache = cache if cache is not None else TTLCache()
        self._http = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json", "User-Agent": user_agent},
            transport=transport,
        )

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    async def fetch(self, key: str) -> Any:
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit: %s", key)
            return cached.value

        token = await self._credentials.current_value()

        logger.info("Fetching FotMob %s", key)
        try:
            resp = await self._http.get(key, headers={TOKEN_FIELD: token})
            resp.raise_for_status()
            payload = resp.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.warning("FotMob fetch failed for %s: %s", key, str(e) or type(e).__name__)
            raise UpstreamError(key, e) from e

        self._cache.set(key, payload)
        return payload

    async def aclose(self) -> None:
        await self._http.aclose()
