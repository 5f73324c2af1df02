"""Event, EventStatus, Side - prediction market as read from the chain."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Allowed drift between total_pool and yes + no before the pair is flagged
POOL_TOLERANCE = Decimal("1e-9")


class EventStatus(str, Enum):
    """Lifecycle: open -> closed -> finished | canceled."""

    OPEN = "open"
    CLOSED = "closed"
    FINISHED = "finished"
    CANCELED = "canceled"

    @property
    def is_terminal(self) -> bool:
        return self in (EventStatus.FINISHED, EventStatus.CANCELED)


class Side(str, Enum):
    """Binary outcome a stake is placed on (and the winning outcome of an event)."""

    YES = "YES"
    NO = "NO"


class OutcomePools(BaseModel):
    """Tokens staked on each side."""

    model_config = ConfigDict(frozen=True)

    yes: Decimal = Field(default=Decimal(0), ge=0)
    no: Decimal = Field(default=Decimal(0), ge=0)

    def pool_for(self, side: Side) -> Decimal:
        return self.yes if side is Side.YES else self.no


class Event(BaseModel):
    """One yes/no prediction market. Immutable once terminal."""

    model_config = ConfigDict(frozen=True)

    id: str
    question: str = ""
    status: EventStatus = EventStatus.OPEN
    outcomes: OutcomePools = Field(default_factory=OutcomePools)
    total_pool: Decimal = Field(default=Decimal(0), ge=0)
    winning_outcome: Side | None = None
    min_stake: Decimal = Field(default=Decimal(0), ge=0)
    max_stake: Decimal = Field(default=Decimal(0), ge=0)
    betting_stop_date: datetime | None = None
    resolution_date: datetime | None = None

    @model_validator(mode="after")
    def _winner_only_when_finished(self) -> Event:
        if self.winning_outcome is not None and self.status is not EventStatus.FINISHED:
            raise ValueError(f"winning_outcome set on {self.status.value} event {self.id}")
        return self

    @property
    def pool_mismatch(self) -> bool:
        """True when total_pool disagrees with yes + no beyond POOL_TOLERANCE."""
        return abs(self.total_pool - (self.outcomes.yes + self.outcomes.no)) > POOL_TOLERANCE

    @property
    def settlement_date(self) -> datetime | None:
        return self.resolution_date or self.betting_stop_date
