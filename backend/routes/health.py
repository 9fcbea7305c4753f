"""Health and readiness check routes."""

from fastapi import APIRouter

from config import settings
from services import fotmob

router = APIRouter()


@router.get("/ready")
async def ready() -> dict:
    """Lightweight readiness check — no external calls."""
    return {"status": "ok", "service": "fotmob-api", "commit": settings.git_sha}


@router.get("/health")
async def health() -> dict:
    """Report the x-mas credential state and cache size.

    Does not trigger the bootstrap; a cold instance reports "pending".
    """
    credentials = fotmob.client.credentials
    if not credentials.resolved:
        credential = "pending"
    elif credentials.degraded:
        credential = "fallback"
    else:
        credential = "dynamic"

    return {
        "status": "degraded" if credential == "fallback" else "ok",
        "service": "fotmob-api",
        "commit": settings.git_sha,
        "credential": credential,
        "cache_entries": fotmob.client.fetcher.cache_size,
    }
