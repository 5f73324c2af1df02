"""Abstract chain reader and consistent snapshot capture."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

import structlog

from betsettle.errors import InconsistentInputError
from betsettle.models.bet import UserBet
from betsettle.models.event import Event
from betsettle.settlement.amounts import check_fee_bps

log = structlog.get_logger(__name__)


class ChainReader(ABC):
    """Read-only source of events, bets and the platform fee. Implement per backend."""

    @abstractmethod
    def get_all_events(self) -> list[Event]:
        """Return every event known to the contract."""
        ...

    @abstractmethod
    def get_multiple_user_bets(self, event_ids: Sequence[str], user_address: str) -> list[UserBet | None]:
        """Return the user's bet for each event id, index-aligned; None where no record exists."""
        ...

    @abstractmethod
    def get_platform_fee(self) -> int | None:
        """Platform fee in basis points, or None if the backend cannot report it."""
        ...

    def get_known_users(self) -> list[str]:
        """Addresses that have placed bets. Backends without an index return []."""
        return []


@dataclass(frozen=True)
class ChainSnapshot:
    """Immutable, fully-fetched view of one user's position."""

    user_address: str
    events: tuple[Event, ...]
    user_bets: tuple[UserBet | None, ...]
    fee_bps: int | None


def take_snapshot(
    reader: ChainReader,
    user_address: str,
    default_fee_bps: int | None = None,
) -> ChainSnapshot:
    """Fetch events, the user's bets and the fee before any computation runs.

    Raises InconsistentInputError if the bets feed is not aligned with the events.
    Pool mismatches and two-sided bets are logged, not rejected.
    """
    events = tuple(reader.get_all_events())
    bets = tuple(reader.get_multiple_user_bets([e.id for e in events], user_address))
    if len(bets) != len(events):
        raise InconsistentInputError(
            f"reader returned {len(bets)} bets for {len(events)} events (user {user_address})"
        )
    fee_bps = reader.get_platform_fee()
    if fee_bps is None:
        fee_bps = default_fee_bps
    fee_bps = check_fee_bps(fee_bps)

    for event, bet in zip(events, bets):
        if event.pool_mismatch:
            log.warning(
                "pool_mismatch",
                event_id=event.id,
                total_pool=str(event.total_pool),
                yes=str(event.outcomes.yes),
                no=str(event.outcomes.no),
            )
        if bet is not None and bet.is_two_sided:
            log.warning(
                "two_sided_bet",
                event_id=event.id,
                user=user_address,
                yes_amount=str(bet.yes_amount),
                no_amount=str(bet.no_amount),
            )
    log.debug("snapshot_taken", user=user_address, events=len(events), fee_bps=fee_bps)
    return ChainSnapshot(user_address=user_address, events=events, user_bets=bets, fee_bps=fee_bps)
