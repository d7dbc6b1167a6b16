from tournament_site.models.participant import Participant
from tournament_site.models.team import Team

__all__ = [
    "Team",
    "Participant",
]
