"""
Registration window state: current phase, countdown seconds,
registered-team counter against the quota.
"""

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from tournament_site.core.config import RegistrationWindow
from tournament_site.schemas.tournament import RegistrationStatus
from tournament_site.services.roster_service import list_registered_teams

logger = logging.getLogger(__name__)

PHASE_NOT_OPEN = "not_open"
PHASE_OPEN = "open"
PHASE_CLOSED = "closed"

MONTHS_ID = (
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
)


def resolve_now(window: RegistrationWindow, now: datetime | None = None) -> datetime:
    """Current time in the event timezone. Naive values are read as event-local time."""
    tz = window.open_at.tzinfo
    if now is None:
        return datetime.now(tz)
    if now.tzinfo is None:
        return now.replace(tzinfo=tz)
    return now


def window_phase(window: RegistrationWindow, now: datetime) -> str:
    """Half-open window: open_at is inside, close_at is already closed."""
    if now < window.open_at:
        return PHASE_NOT_OPEN
    if now >= window.close_at:
        return PHASE_CLOSED
    return PHASE_OPEN


def format_event_time(value: datetime) -> str:
    """'10 Agustus 2025 07:00 WIB'."""
    month = MONTHS_ID[value.month - 1]
    zone = value.tzname() or ""
    return f"{value.day} {month} {value.year} {value:%H:%M} {zone}".rstrip()


def get_registration_status(
    db: Session,
    window: RegistrationWindow,
    max_teams: int,
    now: datetime | None = None,
) -> RegistrationStatus:
    """
    Window phase plus the "X / max_teams" counter.
    The count comes from the roster reader; a failed read counts as 0.
    """
    now = resolve_now(window, now)
    phase = window_phase(window, now)

    roster = list_registered_teams(db)
    if roster.success and roster.teams is not None:
        registered = len(roster.teams)
    else:
        logger.warning("get_registration_status: roster unavailable: %s", roster.error)
        registered = 0

    quota_full = registered >= max_teams
    return RegistrationStatus(
        phase=phase,
        open_at=window.open_at,
        close_at=window.close_at,
        now=now,
        seconds_until_open=max(0, int((window.open_at - now).total_seconds())),
        seconds_until_close=max(0, int((window.close_at - now).total_seconds())),
        registered_teams=registered,
        max_teams=max_teams,
        quota_full=quota_full,
        can_register=phase == PHASE_OPEN and not quota_full,
    )
