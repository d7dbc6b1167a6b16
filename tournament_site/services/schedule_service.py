"""
Static match schedule and placeholder single-elimination bracket.
Nothing here is computed from match results; names are placeholders until
the organisers fill in the draw.
"""

from tournament_site.schemas.tournament import (
    BracketMatch,
    BracketResponse,
    BracketRound,
    BracketSlot,
    ScheduleMatch,
    ScheduleResponse,
)

GROUP_STAGE = "Babak Penyisihan"
PLACEHOLDER_NAME = "TBD"

# (label, home, away) in play order
GROUP_STAGE_MATCHES = [
    ("19 Agustus 2025 Sesi 1", "Tim 1", "Tim 2"),
    ("19 Agustus 2025 Sesi 2", "Tim 3", "Tim 4"),
    ("19 Agustus 2025 Sesi 3", "Tim 5", "Tim 6"),
    ("19 Agustus 2025 Sesi 4", "Tim 7", "Tim 8"),
    ("20 Agustus 2025 Sesi 1", "Tim 9", "Tim 10"),
    ("20 Agustus 2025 Sesi 2", "Tim 11", "Tim 12"),
    ("20 Agustus 2025 Sesi 3", "Tim 13", "Tim 14"),
    ("20 Agustus 2025 Sesi 4", "Tim 15", "Tim 16"),
]


def get_schedule() -> ScheduleResponse:
    return ScheduleResponse(
        stage=GROUP_STAGE,
        matches=[
            ScheduleMatch(label=label, home_team=home, away_team=away)
            for label, home, away in GROUP_STAGE_MATCHES
        ],
    )


def round_name(teams_in_round: int) -> str:
    if teams_in_round == 2:
        return "Final"
    if teams_in_round == 4:
        return "Semi Final"
    if teams_in_round == 8:
        return "Perempat Final"
    return f"Babak {teams_in_round} Besar"


def build_placeholder_bracket(slots: int) -> BracketResponse:
    """
    Empty single-elimination layout for `slots` teams (power of two, >= 2).
    Matches are numbered continuously from the first round to the final.
    """
    if slots < 2 or slots & (slots - 1):
        raise ValueError(f"Bracket size must be a power of two >= 2, got {slots}")

    rounds: list[BracketRound] = []
    match_number = 1
    teams_in_round = slots
    while teams_in_round >= 2:
        matches = []
        for _ in range(teams_in_round // 2):
            matches.append(
                BracketMatch(
                    match_number=match_number,
                    home=BracketSlot(name=PLACEHOLDER_NAME),
                    away=BracketSlot(name=PLACEHOLDER_NAME),
                )
            )
            match_number += 1
        rounds.append(BracketRound(name=round_name(teams_in_round), matches=matches))
        teams_in_round //= 2

    return BracketResponse(slots=slots, rounds=rounds)
