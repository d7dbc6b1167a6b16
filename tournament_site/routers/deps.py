"""Request-scoped access to the settings stored on app.state by create_app()."""

from datetime import datetime

from fastapi import Request

from tournament_site.core.config import RegistrationWindow


def get_window(request: Request) -> RegistrationWindow:
    return request.app.state.registration_window


def get_max_teams(request: Request) -> int:
    return request.app.state.max_teams


def get_now(request: Request) -> datetime | None:
    """None means wall-clock time; tests install a fixed clock."""
    clock = request.app.state.clock
    return clock() if clock is not None else None
