from tournament_site.routers.health import router as health_router
from tournament_site.routers.registration import router as registration_router
from tournament_site.routers.teams import router as teams_router
from tournament_site.routers.tournament import router as tournament_router

__all__ = ["health_router", "registration_router", "teams_router", "tournament_router"]
