"""
Roster of registered teams: one joined read of teams + participants,
returned in registration order. Used by the roster page, the live counter
and the quota gate.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from tournament_site.models import Team
from tournament_site.schemas.teams import RegisteredTeam, RegisteredTeamsResult

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "An unknown error occurred."


def list_registered_teams(db: Session) -> RegisteredTeamsResult:
    """
    Teams ordered by created_at ascending, each with its participants ordered
    by created_at ascending (ties broken by id). Never raises: a failed read
    becomes success=False with the store error.
    """
    try:
        teams = (
            db.query(Team)
            .options(joinedload(Team.participants))
            .order_by(Team.created_at.asc(), Team.id.asc())
            .all()
        )
    except SQLAlchemyError as e:
        # The caller may reuse this session for register()
        db.rollback()
        logger.exception("Failed to fetch registered teams: %s", e)
        return RegisteredTeamsResult(success=False, error=str(e)[:300] or UNKNOWN_ERROR)

    logger.debug("list_registered_teams: %s teams", len(teams))
    return RegisteredTeamsResult(
        success=True,
        teams=[RegisteredTeam.model_validate(t) for t in teams],
    )
