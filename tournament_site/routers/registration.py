"""
Registration API: saveRegistration and the window/quota status used by the
countdown and the "X / max" counter on the landing page.
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from tournament_site.core.config import RegistrationWindow
from tournament_site.core.database import get_db
from tournament_site.routers.deps import get_max_teams, get_now, get_window
from tournament_site.schemas.registration import RegistrationData, RegistrationResult
from tournament_site.schemas.tournament import RegistrationStatus
from tournament_site.services.registration_service import (
    REASON_CLOSED,
    REASON_DUPLICATE_GAME_ID,
    REASON_DUPLICATE_TEAM_NAME,
    REASON_NOT_OPEN,
    REASON_QUOTA_FULL,
    quota_full_failure,
    register,
)
from tournament_site.services.registration_window import get_registration_status
from tournament_site.services.roster_service import list_registered_teams

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["registration"])

FAILURE_STATUS = {
    REASON_NOT_OPEN: 403,
    REASON_CLOSED: 403,
    REASON_DUPLICATE_TEAM_NAME: 409,
    REASON_DUPLICATE_GAME_ID: 409,
    REASON_QUOTA_FULL: 409,
}


@router.get("/registration/status", response_model=RegistrationStatus)
def registration_status(
    db: Session = Depends(get_db),
    window: RegistrationWindow = Depends(get_window),
    max_teams: int = Depends(get_max_teams),
    now: datetime | None = Depends(get_now),
):
    """Window phase, countdown seconds and registered teams against max_teams."""
    return get_registration_status(db, window, max_teams, now=now)


@router.post("/registrations", response_model=RegistrationResult, status_code=201)
def save_registration(
    data: RegistrationData,
    db: Session = Depends(get_db),
    window: RegistrationWindow = Depends(get_window),
    max_teams: int = Depends(get_max_teams),
    now: datetime | None = Depends(get_now),
):
    """
    Registers a team with its five members.
    The quota is checked here, before register(): 409 once max_teams are in.
    Failures: 403 outside the window, 409 duplicates/quota, 500 store errors.
    """
    roster = list_registered_teams(db)
    if roster.success and roster.teams is not None and len(roster.teams) >= max_teams:
        logger.info("save_registration: quota full (%s/%s), team %r rejected", len(roster.teams), max_teams, data.team_name)
        result = quota_full_failure(max_teams)
    else:
        result = register(data, db, window, now=now)

    if result.success:
        return result
    return JSONResponse(
        status_code=FAILURE_STATUS.get(result.reason, 500),
        content=result.model_dump(),
    )
