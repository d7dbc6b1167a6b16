"""Application configuration. Load from environment."""

import os
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

load_dotenv()

DEFAULT_REGISTRATION_OPEN_AT = "2025-08-10T07:00:00"
DEFAULT_REGISTRATION_CLOSE_AT = "2025-08-10T17:00:00"
DEFAULT_EVENT_TIMEZONE = "Asia/Jakarta"
DEFAULT_MAX_TEAMS = 16


@dataclass(frozen=True)
class RegistrationWindow:
    """Half-open interval [open_at, close_at) in which registrations are accepted."""

    open_at: datetime
    close_at: datetime


def get_database_url() -> str:
    """Return DATABASE_URL from environment. Raises if missing."""
    url = os.environ.get("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL environment variable is required")
    return url


def get_event_timezone() -> ZoneInfo:
    name = os.environ.get("EVENT_TIMEZONE", DEFAULT_EVENT_TIMEZONE)
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise RuntimeError(f"EVENT_TIMEZONE is not a known timezone: {name!r}") from e


def _parse_timestamp(var: str, default: str, tz: ZoneInfo) -> datetime:
    raw = os.environ.get(var, default).strip()
    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError as e:
        raise RuntimeError(f"{var} must be an ISO-8601 timestamp, got {raw!r}") from e
    # Naive timestamps are event-local time (WIB by default)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed


def get_registration_window() -> RegistrationWindow:
    """
    Return the registration window from REGISTRATION_OPEN_AT / REGISTRATION_CLOSE_AT.
    Single source for both the write path and the countdown page.
    Raises if the values cannot be parsed or open is not before close.
    """
    tz = get_event_timezone()
    open_at = _parse_timestamp("REGISTRATION_OPEN_AT", DEFAULT_REGISTRATION_OPEN_AT, tz)
    close_at = _parse_timestamp("REGISTRATION_CLOSE_AT", DEFAULT_REGISTRATION_CLOSE_AT, tz)
    if close_at <= open_at:
        raise RuntimeError("REGISTRATION_CLOSE_AT must be after REGISTRATION_OPEN_AT")
    return RegistrationWindow(open_at=open_at, close_at=close_at)


def get_max_teams() -> int:
    """Return the team quota (MAX_TEAMS, default 16)."""
    raw = os.environ.get("MAX_TEAMS")
    if not raw:
        return DEFAULT_MAX_TEAMS
    try:
        value = int(raw)
    except ValueError as e:
        raise RuntimeError(f"MAX_TEAMS must be an integer, got {raw!r}") from e
    if value < 1:
        raise RuntimeError("MAX_TEAMS must be at least 1")
    return value


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()
