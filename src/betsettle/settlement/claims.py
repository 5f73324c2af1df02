"""Unclaimed winnings and refunds across a snapshot."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Sequence

from pydantic import BaseModel, ConfigDict

from betsettle.models.bet import BetOutcome, UserBet
from betsettle.models.event import Event
from betsettle.settlement.resolver import resolve_settlement

# Claims below this are not worth a transaction
DUST_THRESHOLD = Decimal("0.00001")


class ClaimKind(str, Enum):
    WINNINGS = "Winnings"
    REFUND = "Refund"


class Claimable(BaseModel):
    """Amount a user can withdraw from one event."""

    model_config = ConfigDict(frozen=True)

    event_id: str
    event_question: str = ""
    kind: ClaimKind
    amount: Decimal
    is_estimate: bool = False


def claimable_amount(
    event: Event | None,
    user_bet: UserBet | None,
    fee_bps: int | None = None,
) -> Claimable | None:
    """Claimable for one pair, or None if nothing (or only dust) is withdrawable."""
    row = resolve_settlement(event, user_bet, fee_bps)
    if row.outcome is BetOutcome.WON:
        kind = ClaimKind.WINNINGS
    elif row.outcome is BetOutcome.REFUNDABLE:
        kind = ClaimKind.REFUND
    else:
        return None
    if row.winnings <= DUST_THRESHOLD:
        return None
    return Claimable(
        event_id=row.event_id,
        event_question=row.event_question,
        kind=kind,
        amount=row.winnings,
        is_estimate=row.is_estimate,
    )


def list_claimables(
    events: Sequence[Event],
    user_bets: Sequence[UserBet | None],
    fee_bps: int | None = None,
) -> list[Claimable]:
    """Claimables over an index-aligned events / bets feed, in event order."""
    items = []
    for event, bet in zip(events, user_bets):
        item = claimable_amount(event, bet, fee_bps)
        if item is not None:
            items.append(item)
    return items


def total_claimable(items: Sequence[Claimable]) -> Decimal:
    return sum((i.amount for i in items), Decimal(0))
