"""UserBet (chain record), BetOutcome and PnLBet (derived row)."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from betsettle.models.event import Side


class BetOutcome(str, Enum):
    """Settlement state of one user's stake on one event."""

    PENDING = "Pending"
    WON = "Won"
    LOST = "Lost"
    CLAIMED = "Claimed"
    REFUNDABLE = "Refundable"
    REFUNDED = "Refunded"

    @property
    def is_win(self) -> bool:
        return self in (BetOutcome.WON, BetOutcome.CLAIMED)

    @property
    def is_loss(self) -> bool:
        return self is BetOutcome.LOST

    @property
    def is_refund(self) -> bool:
        return self in (BetOutcome.REFUNDABLE, BetOutcome.REFUNDED)

    @property
    def is_settled(self) -> bool:
        return self is not BetOutcome.PENDING


class UserBet(BaseModel):
    """Per-event, per-user stake as stored by the contract."""

    model_config = ConfigDict(frozen=True)

    yes_amount: Decimal = Field(default=Decimal(0), ge=0)
    no_amount: Decimal = Field(default=Decimal(0), ge=0)
    claimed: bool = False

    @property
    def has_bet(self) -> bool:
        return self.yes_amount > 0 or self.no_amount > 0

    @property
    def is_two_sided(self) -> bool:
        return self.yes_amount > 0 and self.no_amount > 0

    @property
    def staked_side(self) -> Side:
        # yes_amount > 0 controls, even if no_amount is also set
        return Side.YES if self.yes_amount > 0 else Side.NO

    @property
    def staked_amount(self) -> Decimal:
        return self.yes_amount if self.staked_side is Side.YES else self.no_amount


class PnLBet(BaseModel):
    """One history row: a user's stake on an event with its settlement result."""

    model_config = ConfigDict(frozen=True)

    event_id: str
    event_question: str = ""
    user_bet: Side = Side.YES
    staked_amount: Decimal = Decimal(0)
    date: datetime | None = None
    outcome: BetOutcome = BetOutcome.PENDING
    winnings: Decimal = Decimal(0)
    pnl: Decimal = Decimal(0)
    is_estimate: bool = False  # fee unknown when computed
