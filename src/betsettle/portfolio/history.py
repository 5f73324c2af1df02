"""Build a user's PnL history from an index-aligned events / bets feed."""

from __future__ import annotations

from typing import Sequence

from betsettle.errors import InconsistentInputError
from betsettle.models.bet import PnLBet, UserBet
from betsettle.models.event import Event
from betsettle.portfolio.aggregator import settlement_order
from betsettle.settlement.resolver import resolve_settlement


def pair_bets(
    events: Sequence[Event],
    user_bets: Sequence[UserBet | None],
) -> list[tuple[Event, UserBet]]:
    """Zip events with bets, keeping only events the user staked on."""
    if len(events) != len(user_bets):
        raise InconsistentInputError(
            f"bets feed not aligned with events: {len(user_bets)} bets for {len(events)} events"
        )
    return [(e, b) for e, b in zip(events, user_bets) if b is not None and b.has_bet]


def build_bet_history(
    events: Sequence[Event],
    user_bets: Sequence[UserBet | None],
    fee_bps: int | None = None,
    *,
    strict: bool = False,
) -> list[PnLBet]:
    """One PnLBet per staked event, in feed order."""
    return [resolve_settlement(e, b, fee_bps, strict=strict) for e, b in pair_bets(events, user_bets)]


def split_active_history(bets: Sequence[PnLBet]) -> tuple[list[PnLBet], list[PnLBet]]:
    """(pending, settled), each newest first."""
    active = [b for b in bets if not b.outcome.is_settled]
    settled = [b for b in bets if b.outcome.is_settled]
    active.sort(key=settlement_order, reverse=True)
    settled.sort(key=settlement_order, reverse=True)
    return active, settled
