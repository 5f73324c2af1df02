"""Canonical schema (Pydantic) - Event, UserBet, PnLBet, stats."""

from betsettle.models.bet import BetOutcome, PnLBet, UserBet
from betsettle.models.event import Event, EventStatus, OutcomePools, Side
from betsettle.models.stats import PortfolioStats, Rank, UserStats

__all__ = [
    "Event",
    "EventStatus",
    "OutcomePools",
    "Side",
    "UserBet",
    "BetOutcome",
    "PnLBet",
    "UserStats",
    "PortfolioStats",
    "Rank",
]
