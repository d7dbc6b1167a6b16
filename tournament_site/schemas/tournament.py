"""Pydantic schemas: registration status (countdown), schedule, bracket."""

from datetime import datetime

from pydantic import BaseModel


class RegistrationStatus(BaseModel):
    phase: str  # "not_open" | "open" | "closed"
    open_at: datetime
    close_at: datetime
    now: datetime
    seconds_until_open: int
    seconds_until_close: int
    registered_teams: int
    max_teams: int
    quota_full: bool
    can_register: bool


# --- Schedule ---


class ScheduleMatch(BaseModel):
    label: str  # "19 Agustus 2025 Sesi 1"
    home_team: str
    away_team: str
    home_logo: str | None = None
    away_logo: str | None = None


class ScheduleResponse(BaseModel):
    stage: str
    matches: list[ScheduleMatch]


# --- Bracket ---


class BracketSlot(BaseModel):
    name: str
    logo_url: str | None = None


class BracketMatch(BaseModel):
    match_number: int
    home: BracketSlot
    away: BracketSlot


class BracketRound(BaseModel):
    name: str
    matches: list[BracketMatch]


class BracketResponse(BaseModel):
    slots: int
    rounds: list[BracketRound]
