from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from fastapi.testclient import TestClient

from tournament_site.core.config import RegistrationWindow
from tournament_site.core.database import create_db_engine, create_session_factory, init_db
from tournament_site.main import create_app
from tournament_site.schemas.registration import RegistrationData

WIB = ZoneInfo("Asia/Jakarta")
OPEN_AT = datetime(2025, 8, 10, 7, 0, tzinfo=WIB)
CLOSE_AT = datetime(2025, 8, 10, 17, 0, tzinfo=WIB)
IN_WINDOW = datetime(2025, 8, 10, 10, 0, tzinfo=WIB)


@pytest.fixture
def window() -> RegistrationWindow:
    return RegistrationWindow(open_at=OPEN_AT, close_at=CLOSE_AT)


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def empty_db():
    """Session on a database without tables: every query fails."""
    engine = create_db_engine("sqlite://")
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


def registration_payload(team_name: str, id_prefix: str, logo_url: str | None = None) -> dict:
    return {
        "team_name": team_name,
        "logo_url": logo_url,
        "participants": [
            {"nickname": f"{team_name}-p{i}", "game_id": f"{id_prefix}{i:03d}"}
            for i in range(1, 6)
        ],
    }


@pytest.fixture
def make_registration():
    def _make(team_name: str, id_prefix: str, logo_url: str | None = None) -> RegistrationData:
        return RegistrationData.model_validate(registration_payload(team_name, id_prefix, logo_url))

    return _make


@pytest.fixture
def app_factory(window):
    def _build(max_teams: int = 16, now: datetime = IN_WINDOW):
        return create_app(
            database_url="sqlite://",
            registration_window=window,
            max_teams=max_teams,
            clock=lambda: now,
        )

    return _build


@pytest.fixture
def client(app_factory):
    with TestClient(app_factory()) as test_client:
        yield test_client


@pytest.fixture
def make_payload():
    return registration_payload
