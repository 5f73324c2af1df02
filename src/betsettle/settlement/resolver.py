"""Settlement resolver: (Event, UserBet) -> outcome, winnings, PnL."""

from __future__ import annotations

from decimal import Decimal

from betsettle.errors import InconsistentInputError
from betsettle.models.bet import BetOutcome, PnLBet, UserBet
from betsettle.models.event import Event, EventStatus
from betsettle.settlement.amounts import (
    check_fee_bps,
    compute_payout,
    from_base_units,
    to_base_units,
)

# (user_won, claimed) -> outcome on a finished event
_FINISHED = {
    (True, False): BetOutcome.WON,
    (True, True): BetOutcome.CLAIMED,
    (False, False): BetOutcome.LOST,
    (False, True): BetOutcome.LOST,
}


def user_won(event: Event, user_bet: UserBet) -> bool:
    """True when the event is finished and the bet's controlling side won."""
    if event.status is not EventStatus.FINISHED or event.winning_outcome is None:
        return False
    return user_bet.staked_side is event.winning_outcome


def classify_outcome(event: Event, user_bet: UserBet) -> BetOutcome:
    """Map event state and claim flag to a BetOutcome."""
    if not event.status.is_terminal:
        return BetOutcome.PENDING
    if event.status is EventStatus.CANCELED:
        return BetOutcome.REFUNDED if user_bet.claimed else BetOutcome.REFUNDABLE
    if event.status is EventStatus.FINISHED and event.winning_outcome is not None:
        return _FINISHED[(user_won(event, user_bet), user_bet.claimed)]
    # finished without a declared winner
    return BetOutcome.PENDING


def resolve_settlement(
    event: Event | None,
    user_bet: UserBet | None,
    fee_bps: int | None = None,
    *,
    strict: bool = False,
) -> PnLBet:
    """Settle one user's stake on one event.

    Winnings follow the contract in fixed point:
    ``stake * (total_pool - fee) // winning_pool``. With ``fee_bps=None`` the
    fee is taken as zero and the row is marked ``is_estimate``.

    Missing data is not an error: no event, no bet, or a bet with no stake
    all yield a zero-valued Pending row. A bet staked on both sides is
    settled on YES unless ``strict`` is set, in which case
    InconsistentInputError is raised.
    """
    fee_bps = check_fee_bps(fee_bps)
    if event is None:
        return PnLBet(event_id="")
    base = {
        "event_id": event.id,
        "event_question": event.question,
        "date": event.settlement_date,
    }
    if user_bet is None or not user_bet.has_bet:
        return PnLBet(**base)
    if strict and user_bet.is_two_sided:
        raise InconsistentInputError(f"bet on event {event.id} is staked on both sides")

    outcome = classify_outcome(event, user_bet)
    # Chain precision: sub-wei dust is dropped before refund, payout and pnl
    stake = from_base_units(to_base_units(user_bet.staked_amount))
    winnings = Decimal(0)
    pnl = Decimal(0)
    estimate = False

    if outcome.is_refund:
        winnings = stake
    elif outcome.is_win:
        winning_pool = event.outcomes.pool_for(event.winning_outcome)
        winnings = compute_payout(stake, winning_pool, event.total_pool, fee_bps)
        pnl = winnings - stake
        estimate = fee_bps is None and winning_pool > 0
    elif outcome.is_loss:
        pnl = -stake

    return PnLBet(
        **base,
        user_bet=user_bet.staked_side,
        staked_amount=stake,
        outcome=outcome,
        winnings=winnings,
        pnl=pnl,
        is_estimate=estimate,
    )
