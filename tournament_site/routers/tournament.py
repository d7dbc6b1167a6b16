"""Schedule and bracket API. Static data, no database access."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from tournament_site.routers.deps import get_max_teams
from tournament_site.schemas.tournament import BracketResponse, ScheduleResponse
from tournament_site.services.schedule_service import build_placeholder_bracket, get_schedule

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["tournament"])


@router.get("/schedule", response_model=ScheduleResponse)
def schedule():
    return get_schedule()


@router.get("/bracket", response_model=BracketResponse)
def bracket(max_teams: int = Depends(get_max_teams)):
    """Placeholder single-elimination bracket sized to the team quota."""
    try:
        return build_placeholder_bracket(max_teams)
    except ValueError as e:
        logger.warning("bracket: %s", e)
        raise HTTPException(status_code=503, detail=f"Bracket not available: {e}")
