"""Registered-teams API (getRegisteredTeams)."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from tournament_site.core.database import get_db
from tournament_site.schemas.teams import RegisteredTeamsResult
from tournament_site.services.roster_service import list_registered_teams

router = APIRouter(prefix="/api/teams", tags=["teams"])


@router.get("", response_model=RegisteredTeamsResult)
def registered_teams(db: Session = Depends(get_db)):
    """
    Teams in registration order, each with its five participants.
    500 with success=false if the store read fails (never an unhandled error).
    """
    result = list_registered_teams(db)
    if not result.success:
        return JSONResponse(status_code=500, content=result.model_dump(mode="json"))
    return result
