"""Pydantic schemas for the registered-teams roster."""

from datetime import datetime

from pydantic import BaseModel


class ParticipantOut(BaseModel):
    nickname: str
    game_id: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class RegisteredTeam(BaseModel):
    id: int
    name: str
    logo_url: str | None = None
    created_at: datetime | None = None
    participants: list[ParticipantOut]

    class Config:
        from_attributes = True


class RegisteredTeamsResult(BaseModel):
    success: bool
    teams: list[RegisteredTeam] | None = None
    error: str | None = None
