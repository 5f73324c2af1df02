"""Trust score and the rank ladder."""

from __future__ import annotations

from betsettle.errors import ValidationError
from betsettle.models.stats import Rank

WIN_POINTS = 5
LOSS_PENALTY = 2

# Ascending by score
RANKS: tuple[Rank, ...] = (
    Rank(name="Initiate", score=0),
    Rank(name="Analyst", score=30),
    Rank(name="Sigma", score=75),
    Rank(name="Apex", score=150),
)


def compute_trust_score(wins: int, losses: int) -> int:
    """wins * 5 - losses * 2. Can go negative."""
    if wins < 0 or losses < 0:
        raise ValidationError(f"win/loss counts must be non-negative, got {wins}/{losses}")
    return wins * WIN_POINTS - losses * LOSS_PENALTY


def get_rank(trust_score: float | None) -> Rank:
    """Highest rank whose threshold is <= trust_score. None or negative -> Initiate."""
    score = trust_score if trust_score is not None else 0
    for rank in reversed(RANKS):
        if score >= rank.score:
            return rank
    return RANKS[0]


def next_rank(trust_score: float | None) -> Rank | None:
    """Rank above the current one, or None at the top of the ladder."""
    current = get_rank(trust_score)
    idx = RANKS.index(current)
    if idx + 1 < len(RANKS):
        return RANKS[idx + 1]
    return None
