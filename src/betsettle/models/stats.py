"""UserStats, PortfolioStats, Rank - derived summaries."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class UserStats(BaseModel):
    """Win/loss record and trust score of one user."""

    model_config = ConfigDict(frozen=True)

    wins: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)
    total_bets: int = Field(default=0, ge=0)
    accuracy: float = 0.0  # percent
    trust_score: int = 0
    user_id: str | None = None

    @model_validator(mode="after")
    def _totals_add_up(self) -> UserStats:
        if self.total_bets != self.wins + self.losses:
            raise ValueError("total_bets must equal wins + losses")
        if self.total_bets == 0 and self.accuracy != 0:
            raise ValueError("accuracy must be 0 when total_bets is 0")
        return self


class PortfolioStats(BaseModel):
    """Aggregate of a user's bet history."""

    model_config = ConfigDict(frozen=True)

    net_pnl: Decimal = Decimal(0)
    win_rate: float = 0.0  # percent
    total_volume: Decimal = Decimal(0)
    longest_streak: int = 0
    total_bets: int = 0
    wins: int = 0


class Rank(BaseModel):
    """Tier on the trust-score ladder."""

    model_config = ConfigDict(frozen=True)

    name: str
    score: int
