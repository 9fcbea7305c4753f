"""FotMob client — endpoint helpers over the cached, credentialed fetcher.

One instance per process, created at import time like the other shared
services. The helpers only build the logical key and delegate to fetch().
"""

import logging
from typing import Any

import httpx

from config import settings
from errors import InvalidParameterError, MissingParameterError
from services.cache import TTLCache
from services.credentials import CredentialGate
from services.fetcher import CachingFetcher

logger = logging.getLogger(__name__)

DEFAULT_LEAGUE_TAB = "overview"


def _require(name: str, value: Any) -> str:
    if value is None or not str(value).strip():
        logger.info("Rejected FotMob request: missing %s", name)
        raise MissingParameterError(name)
    value = str(value).strip()
    if not value.isprintable():
        logger.info("Rejected FotMob request: non-printable %s %r", name, value)
        raise InvalidParameterError(name)
    return value


class FotmobClient:
    def __init__(
        self,
        credentials: CredentialGate,
        fetcher: CachingFetcher,
        default_time_zone: str = "Europe/Paris",
    ):
        self.credentials = credentials
        self.fetcher = fetcher
        self.default_time_zone = default_time_zone

    @classmethod
    def from_settings(
        cls,
        cache: TTLCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        bootstrap_transport: httpx.AsyncBaseTransport | None = None,
    ) -> "FotmobClient":
        credentials = CredentialGate(
            bootstrap_url=settings.bootstrap_url,
            fallback_value=settings.fallback_value,
            transport=bootstrap_transport,
        )
        fetcher = CachingFetcher(
            credentials,
            base_url=settings.api_base_url,
            user_agent=settings.user_agent,
            cache=cache,
            transport=transport,
        )
        return cls(credentials, fetcher, default_time_zone=settings.default_time_zone)

    async def fetch(self, key: str) -> Any:
        return await self.fetcher.fetch(key)

    async def fetch_league(
        self,
        id: str | int | None,
        tab: str | None = None,
        time_zone: str | None = None,
    ) -> dict:
        """League overview or table. Omitted tab/time_zone share the defaults' cache entry."""
        league_id = _require("id", id)
        tab = tab or DEFAULT_LEAGUE_TAB
        time_zone = time_zone or self.default_time_zone
        return await self.fetch(f"leagues?id={league_id}&tab={tab}&type=league&timeZone={time_zone}")

    async def fetch_match_details(self, id: str | int | None, time_zone: str | None = None) -> dict:
        match_id = _require("matchId", id)
        time_zone = time_zone or self.default_time_zone
        return await self.fetch(f"matchDetails?matchId={match_id}&timeZone={time_zone}")

    async def aclose(self) -> None:
        await self.fetcher.aclose()


client = FotmobClient.from_settings()
