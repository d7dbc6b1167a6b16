"""Pydantic schemas for team registration (form input and outcome)."""

from pydantic import BaseModel, Field, HttpUrl, TypeAdapter, ValidationError, field_validator

TEAM_SIZE = 5
LOGO_URL_MAX_LENGTH = 512  # teams.logo_url column size

_http_url = TypeAdapter(HttpUrl)


class ParticipantIn(BaseModel):
    nickname: str = Field(min_length=3, max_length=50)
    game_id: str = Field(min_length=5, max_length=20)


class RegistrationData(BaseModel):
    """Form pendaftaran: nama tim, logo opsional, lima anggota."""
    team_name: str = Field(min_length=3, max_length=50)
    logo_url: str | None = Field(default=None, max_length=LOGO_URL_MAX_LENGTH)
    participants: list[ParticipantIn] = Field(min_length=TEAM_SIZE, max_length=TEAM_SIZE)

    @field_validator("logo_url", mode="before")
    @classmethod
    def _blank_logo_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("logo_url")
    @classmethod
    def _logo_is_http_url(cls, value: str | None) -> str | None:
        # Validated as HttpUrl, stored exactly as submitted
        if value is not None:
            try:
                _http_url.validate_python(value)
            except ValidationError as e:
                raise ValueError("URL logo tidak valid") from e
        return value

    @field_validator("participants")
    @classmethod
    def _unique_within_team(cls, participants: list[ParticipantIn]) -> list[ParticipantIn]:
        nicknames = [p.nickname for p in participants]
        if len(set(nicknames)) != len(nicknames):
            raise ValueError(
                "Terdapat nickname yang sama di antara anggota tim. Harap gunakan nickname yang unik."
            )
        game_ids = [p.game_id for p in participants]
        if len(set(game_ids)) != len(game_ids):
            raise ValueError(
                "Terdapat ID Game yang sama di antara anggota tim. Harap gunakan ID Game yang unik."
            )
        return participants

    @property
    def game_ids(self) -> list[str]:
        return [p.game_id for p in self.participants]


class RegistrationResult(BaseModel):
    """Outcome of saveRegistration. success=False always carries error and reason."""
    success: bool
    message: str
    error: str | None = None
    reason: str | None = None  # registration_not_open | registration_closed | duplicate_* | quota_full | store_error
    team_number: int | None = None
