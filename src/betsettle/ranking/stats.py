"""UserStats from win/loss counts or from an events / bets feed."""

from __future__ import annotations

from typing import Sequence

from betsettle.models.bet import UserBet
from betsettle.models.event import Event, EventStatus
from betsettle.models.stats import UserStats
from betsettle.portfolio.history import pair_bets
from betsettle.ranking.trust import compute_trust_score
from betsettle.settlement.resolver import user_won


def user_stats_from_counts(wins: int, losses: int, user_id: str | None = None) -> UserStats:
    """Build UserStats (accuracy, trust score) from raw counts, e.g. the contract's user history."""
    trust_score = compute_trust_score(wins, losses)
    total_bets = wins + losses
    accuracy = wins / total_bets * 100 if total_bets > 0 else 0.0
    return UserStats(
        wins=wins,
        losses=losses,
        total_bets=total_bets,
        accuracy=accuracy,
        trust_score=trust_score,
        user_id=user_id,
    )


def compute_user_stats(
    events: Sequence[Event],
    user_bets: Sequence[UserBet | None],
    user_id: str | None = None,
) -> UserStats:
    """Count wins and losses over finished events the user staked on."""
    wins = 0
    losses = 0
    for event, bet in pair_bets(events, user_bets):
        if event.status is not EventStatus.FINISHED or event.winning_outcome is None:
            continue
        if user_won(event, bet):
            wins += 1
        else:
            losses += 1
    return user_stats_from_counts(wins, losses, user_id=user_id)
