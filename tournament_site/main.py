"""AKUI MLBB E-Sport: team registration, roster, schedule and bracket site."""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from tournament_site.core.config import (
    RegistrationWindow,
    get_log_level,
    get_max_teams,
    get_registration_window,
)
from tournament_site.core.database import create_db_engine, create_session_factory, get_db, init_db
from tournament_site.routers import health_router, registration_router, teams_router, tournament_router
from tournament_site.routers.deps import get_now
from tournament_site.services.registration_window import format_event_time, get_registration_status
from tournament_site.services.roster_service import list_registered_teams
from tournament_site.services.schedule_service import build_placeholder_bracket, get_schedule

logger = logging.getLogger(__name__)

templates_dir = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(templates_dir))
templates.env.filters["event_time"] = format_event_time


def create_app(
    database_url: str | None = None,
    registration_window: RegistrationWindow | None = None,
    max_teams: int | None = None,
    clock: Callable[[], datetime] | None = None,
) -> FastAPI:
    """
    Build the application. Missing DATABASE_URL fails here, not at first request.
    Run with: uvicorn tournament_site.main:create_app --factory
    """
    engine = create_db_engine(database_url)

    app = FastAPI(
        title="AKUI MLBB E-Sport",
        description="Team registration, roster, schedule and bracket for the AKUI MLBB tournament.",
        version="0.1.0",
    )
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.registration_window = registration_window or get_registration_window()
    app.state.max_teams = max_teams or get_max_teams()
    app.state.clock = clock

    app.include_router(health_router)
    app.include_router(registration_router)
    app.include_router(teams_router)
    app.include_router(tournament_router)

    @app.get("/", include_in_schema=False)
    def index(request: Request, db: Session = Depends(get_db), now: datetime | None = Depends(get_now)):
        status = get_registration_status(
            db, request.app.state.registration_window, request.app.state.max_teams, now=now
        )
        return templates.TemplateResponse(request, "index.html", {"status": status})

    @app.get("/registered-team", include_in_schema=False)
    def page_registered_team(request: Request, db: Session = Depends(get_db)):
        roster = list_registered_teams(db)
        return templates.TemplateResponse(request, "registered_team.html", {"roster": roster})

    @app.get("/schedule", include_in_schema=False)
    def page_schedule(request: Request):
        return templates.TemplateResponse(request, "schedule.html", {"schedule": get_schedule()})

    @app.get("/bracket", include_in_schema=False)
    def page_bracket(request: Request):
        """The page stays up when the quota cannot be laid out as a bracket."""
        try:
            bracket = build_placeholder_bracket(request.app.state.max_teams)
        except ValueError as e:
            logger.warning("page_bracket: %s", e)
            return templates.TemplateResponse(request, "bracket.html", {"bracket": None})
        return templates.TemplateResponse(request, "bracket.html", {"bracket": bracket})

    @app.on_event("startup")
    def on_startup():
        """Configure logging and create the tables if missing."""
        logging.basicConfig(level=get_log_level(), format="%(levelname)s [%(name)s] %(message)s")
        init_db(engine)
        window = app.state.registration_window
        logger.info(
            "Registration window %s - %s, quota %s teams",
            window.open_at.isoformat(),
            window.close_at.isoformat(),
            app.state.max_teams,
        )

    return app
