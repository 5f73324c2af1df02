"""Implied odds and pool shares (float, UI estimate path)."""

from __future__ import annotations

from typing import Any

from betsettle.models.event import Event, Side
from betsettle.settlement.amounts import check_amount


def compute_odds(pool_a: Any, pool_b: Any) -> float:
    """Decimal odds for side A: (a + b) / a. An empty side pays even money (1.0)."""
    a = float(check_amount(pool_a, "pool_a"))
    b = float(check_amount(pool_b, "pool_b"))
    if a > 0:
        return (a + b) / a
    return 1.0


def compute_win_percentage(yes_pool: Any, no_pool: Any) -> float:
    """Share of the pool on YES in percent; 50 when nothing is staked."""
    yes = float(check_amount(yes_pool, "yes_pool"))
    no = float(check_amount(no_pool, "no_pool"))
    total = yes + no
    if total > 0:
        return yes / total * 100
    return 50.0


def event_odds(event: Event) -> tuple[float, float]:
    """(yes odds, no odds) for an event."""
    yes, no = event.outcomes.yes, event.outcomes.no
    return compute_odds(yes, no), compute_odds(no, yes)


def compute_potential_winnings(event: Event, side: Side, stake: Any) -> float:
    """Preview payout if stake joined side's pool now (bet slip figure, fee ignored)."""
    s = check_amount(stake, "stake")
    if s <= 0:
        return 0.0
    side_pool = event.outcomes.pool_for(side)
    odds = (event.total_pool + s) / (side_pool + s)
    return float(s * odds)


def pool_shares(event: Event) -> tuple[float, float]:
    yes_pct = compute_win_percentage(event.outcomes.yes, event.outcomes.no)
    return yes_pct, 100.0 - yes_pct
