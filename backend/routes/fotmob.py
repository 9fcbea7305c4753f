"""FotMob data routes — thin wrappers over the shared cached client.

Missing ids surface as 400, upstream failures as 502 (see errors.py).
"""

from fastapi import APIRouter, Query

from services import fotmob

router = APIRouter()


@router.get("/leagues")
async def league(
    id: str | None = Query(None),
    tab: str | None = Query(None),
    time_zone: str | None = Query(None, alias="timeZone"),
) -> dict:
    """League overview (default) or table for a FotMob league id."""
    return await fotmob.client.fetch_league(id, tab=tab, time_zone=time_zone)


@router.get("/matchDetails")
async def match_details(
    match_id: str | None = Query(None, alias="matchId"),
    time_zone: str | None = Query(None, alias="timeZone"),
) -> dict:
    """Full match details for a FotMob match id."""
    return await fotmob.client.fetch_match_details(match_id, time_zone=time_zone)
