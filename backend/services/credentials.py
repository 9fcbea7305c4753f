"""x-mas header bootstrap for FotMob requests.

FotMob rejects API calls that lack a valid ``x-mas`` header. The value is
served by a small side-channel service that is often down or blocked, so the
gate falls back to a static value instead of failing.

The bootstrap runs at most once per process. Every caller awaits the same
task, whether it is still in flight or long finished. A failed bootstrap is
terminal: the fallback is kept for the rest of the process lifetime.
"""

import asyncio
import logging

import httpx

logger = logging.getLogger(__name__)

TOKEN_FIELD = "x-mas"
BOOTSTRAP_TIMEOUT_SECONDS = 5.0


class CredentialGate:
    def __init__(
        self,
        bootstrap_url: str,
        fallback_value: str,
        timeout: float = BOOTSTRAP_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.bootstrap_url = bootstrap_url
        self.fallback_value = fallback_value
        self._timeout = timeout
        self._transport = transport
        self._value: str | None = None
        self._degraded = False
        self._resolution: asyncio.Task | None = None
        self.attempts = 0

    @property
    def resolved(self) -> bool:
        return self._value is not None

    @property
    def degraded(self) -> bool:
        """True once the fallback value is in use."""
        return self._degraded

    def prime(self) -> None:
        """Start the bootstrap in the background. Needs a running event loop."""
        self._shared_resolution()

    async def ensure_ready(self) -> None:
        """Wait until the header value is known. Never raises."""
        resolution = self._shared_resolution()
        try:
            # A cancelled caller must not cancel the resolution other callers share.
            await asyncio.shield(resolution)
        except asyncio.CancelledError:
            if not resolution.cancelled():
                raise
        if resolution.cancelled() and self._value is None:
            # Shared task torn down mid-flight. Terminal like any other failure.
            logger.warning("x-mas bootstrap was cancelled, using static fallback")
            self._value = self.fallback_value
            self._degraded = True

    async def current_value(self) -> str:
        await self.ensure_ready()
        return self._value or self.fallback_value

    def _shared_resolution(self) -> asyncio.Task:
        # No await between the check and the assignment, so only one task is ever created.
        if self._resolution is None:
            self._resolution = asyncio.ensure_future(self._resolve())
        return self._resolution

    async def _resolve(self) -> None:
        try:
            self._value = await self._fetch_token()
            logger.info("x-mas header initialized from %s", self.bootstrap_url)
        except Exception as e:
            logger.warning("x-mas bootstrap failed, using static fallback: %s", str(e) or type(e).__name__)
            self._value = self.fallback_value
            self._degraded = True

    async def _fetch_token(self) -> str:
        self.attempts += 1
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            resp = await client.get(self.bootstrap_url)
            resp.raise_for_status()
            data = resp.json()

        token = data.get(TOKEN_FIELD) if isinstance(data, dict) else None
        if not token or not isinstance(token, str):
            raise ValueError(f"Bootstrap response has no usable '{TOKEN_FIELD}' field")
        return token
