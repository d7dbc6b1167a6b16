from tournament_site.core.config import RegistrationWindow, get_database_url, get_max_teams, get_registration_window
from tournament_site.core.database import Base, create_db_engine, create_session_factory, get_db, init_db

__all__ = [
    "RegistrationWindow",
    "get_database_url",
    "get_max_teams",
    "get_registration_window",
    "Base",
    "create_db_engine",
    "create_session_factory",
    "get_db",
    "init_db",
]
