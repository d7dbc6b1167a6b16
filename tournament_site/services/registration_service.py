"""
Team registration: window check, uniqueness checks, team numbering and the
team + five participants insert.

Each check short-circuits into a RegistrationResult with success=False; no
exception leaves register(). The two inserts share one transaction, so a
failed participant insert rolls the team back as well.
"""

import logging
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from tournament_site.core.config import RegistrationWindow
from tournament_site.models import Participant, Team
from tournament_site.schemas.registration import RegistrationData, RegistrationResult
from tournament_site.services.registration_window import (
    PHASE_CLOSED,
    PHASE_NOT_OPEN,
    format_event_time,
    resolve_now,
    window_phase,
)

logger = logging.getLogger(__name__)

MESSAGE_SUCCESS = "Pendaftaran berhasil disimpan."
MESSAGE_FAILED = "Pendaftaran gagal."
MESSAGE_STORE_FAILED = "Pendaftaran gagal disimpan."
UNKNOWN_ERROR = "An unknown error occurred."

REASON_NOT_OPEN = "registration_not_open"
REASON_CLOSED = "registration_closed"
REASON_DUPLICATE_TEAM_NAME = "duplicate_team_name"
REASON_DUPLICATE_GAME_ID = "duplicate_game_id"
REASON_QUOTA_FULL = "quota_full"
REASON_STORE_ERROR = "store_error"


def failure(reason: str, error: str, message: str = MESSAGE_FAILED) -> RegistrationResult:
    return RegistrationResult(success=False, message=message, error=error, reason=reason)


def quota_full_failure(max_teams: int) -> RegistrationResult:
    return failure(
        REASON_QUOTA_FULL,
        f"Maaf, kuota pendaftaran sudah penuh. Maksimal {max_teams} tim.",
    )


def _store_failure(exc: Exception) -> RegistrationResult:
    return failure(REASON_STORE_ERROR, str(exc)[:300] or UNKNOWN_ERROR, message=MESSAGE_STORE_FAILED)


def _team_name_taken(db: Session, team_name: str) -> bool:
    # Exact match: "Alpha" and "alpha" are different teams
    return db.query(Team.id).filter(Team.name == team_name).first() is not None


def _first_taken_game_id(db: Session, game_ids: list[str]) -> str | None:
    row = (
        db.query(Participant.game_id)
        .filter(Participant.game_id.in_(game_ids))
        .order_by(Participant.id.asc())
        .first()
    )
    return row.game_id if row else None


def _duplicate_team_name(team_name: str) -> RegistrationResult:
    return failure(REASON_DUPLICATE_TEAM_NAME, f'Nama tim "{team_name}" sudah terdaftar.')


def _duplicate_game_id(game_id: str) -> RegistrationResult:
    return failure(REASON_DUPLICATE_GAME_ID, f'ID Game "{game_id}" sudah terdaftar.')


def _conflict_after_integrity_error(db: Session, data: RegistrationData) -> RegistrationResult | None:
    """
    A UNIQUE violation means a concurrent registration won the race between
    our checks and the insert. Re-run the checks to name the conflicting value.
    """
    try:
        if _team_name_taken(db, data.team_name):
            return _duplicate_team_name(data.team_name)
        taken = _first_taken_game_id(db, data.game_ids)
        if taken is not None:
            return _duplicate_game_id(taken)
    except SQLAlchemyError as e:
        logger.exception("register: re-check after IntegrityError failed: %s", e)
    return None


def register(
    data: RegistrationData,
    db: Session,
    window: RegistrationWindow,
    now: datetime | None = None,
) -> RegistrationResult:
    """
    saveRegistration. The window comes from server config, never from the client.
    On success returns the advisory team number (team count before insert + 1).
    """
    logger.info("register: starting registration for team %r", data.team_name)

    now = resolve_now(window, now)
    phase = window_phase(window, now)
    if phase == PHASE_NOT_OPEN:
        logger.warning("register: attempted early registration at %s", now.isoformat())
        return failure(
            REASON_NOT_OPEN,
            "Pendaftaran belum dibuka. Silakan coba lagi setelah tanggal "
            + format_event_time(window.open_at),
        )
    if phase == PHASE_CLOSED:
        logger.warning("register: attempted late registration at %s", now.isoformat())
        return failure(
            REASON_CLOSED,
            "Pendaftaran telah ditutup pada " + format_event_time(window.close_at),
        )

    try:
        if _team_name_taken(db, data.team_name):
            logger.info("register: duplicate team name %r", data.team_name)
            return _duplicate_team_name(data.team_name)

        taken = _first_taken_game_id(db, data.game_ids)
        if taken is not None:
            logger.info("register: duplicate game id %r", taken)
            return _duplicate_game_id(taken)

        # Read-then-use without locking: two concurrent registrations may get the same number
        current_total = db.query(func.count(Team.id)).scalar() or 0
        team_number = current_total + 1
        logger.debug("register: current total teams=%s, new team number=%s", current_total, team_number)

        team = Team(
            name=data.team_name,
            logo_url=data.logo_url,
        )
        db.add(team)
        db.flush()
        team_id = team.id
        logger.debug("register: team flushed with id=%s", team_id)

        db.add_all(
            [
                Participant(team_id=team_id, nickname=p.nickname, game_id=p.game_id)
                for p in data.participants
            ]
        )
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("register: constraint violation for team %r, rolled back: %s", data.team_name, e)
        return _conflict_after_integrity_error(db, data) or _store_failure(e)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("register: store error for team %r, rolled back: %s", data.team_name, e)
        return _store_failure(e)

    logger.info("register: team %r registered as #%s (id=%s)", data.team_name, team_number, team_id)
    return RegistrationResult(success=True, message=MESSAGE_SUCCESS, team_number=team_number)
