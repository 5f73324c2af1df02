"""Leaderboard ordering."""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict

from betsettle.models.stats import Rank, UserStats
from betsettle.ranking.trust import get_rank


class LeaderboardEntry(BaseModel):
    """One leaderboard row (position is 1-based)."""

    model_config = ConfigDict(frozen=True)

    position: int
    user: UserStats
    rank: Rank


def leaderboard_key(user: UserStats) -> tuple[int, int]:
    return (-user.trust_score, -user.total_bets)


def rank_leaderboard(users: Iterable[UserStats]) -> list[UserStats]:
    """Trust score descending, then total bets descending. Ties keep input order."""
    return sorted(users, key=leaderboard_key)


def build_leaderboard(users: Iterable[UserStats], limit: int | None = None) -> list[LeaderboardEntry]:
    ordered = rank_leaderboard(users)
    if limit is not None:
        ordered = ordered[: max(limit, 0)]
    return [
        LeaderboardEntry(position=i, user=u, rank=get_rank(u.trust_score))
        for i, u in enumerate(ordered, start=1)
    ]
