"""Fold a bet history into PortfolioStats (net PnL, volume, win rate, streak)."""

from __future__ import annotations

from datetime import timezone
from decimal import Decimal
from typing import Iterable

from betsettle.models.bet import PnLBet
from betsettle.models.stats import PortfolioStats


def settlement_order(bet: PnLBet) -> tuple[int, float]:
    """Sort key: undated rows first, then by date ascending. Naive dates are UTC."""
    if bet.date is None:
        return (0, 0.0)
    date = bet.date
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    return (1, date.timestamp())


def longest_win_streak(bets: Iterable[PnLBet]) -> int:
    """Longest run of wins in the given order. Losses break a run; pending and refunds don't."""
    current = 0
    longest = 0
    for bet in bets:
        if bet.outcome.is_win:
            current += 1
        elif bet.outcome.is_loss:
            longest = max(longest, current)
            current = 0
    return max(longest, current)


def aggregate_portfolio(bets: Iterable[PnLBet]) -> PortfolioStats:
    """Summarize a user's bets. Input order does not matter; rows are sorted by date."""
    ordered = sorted(bets, key=settlement_order)
    if not ordered:
        return PortfolioStats()

    net_pnl = Decimal(0)
    total_volume = Decimal(0)
    wins = 0
    losses = 0
    for bet in ordered:
        total_volume += bet.staked_amount
        net_pnl += bet.pnl
        if bet.outcome.is_win:
            wins += 1
        elif bet.outcome.is_loss:
            losses += 1

    total_bets = wins + losses
    win_rate = wins / total_bets * 100 if total_bets > 0 else 0.0
    return PortfolioStats(
        net_pnl=net_pnl,
        win_rate=win_rate,
        total_volume=total_volume,
        longest_streak=longest_win_streak(ordered),
        total_bets=total_bets,
        wins=wins,
    )


def total_winnings(bets: Iterable[PnLBet]) -> Decimal:
    """Sum of payouts on winning rows (refunds excluded)."""
    return sum((b.winnings for b in bets if b.outcome.is_win), Decimal(0))
