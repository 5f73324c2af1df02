"""Achievement catalogue evaluated against a user's stats."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from pydantic import BaseModel, ConfigDict

from betsettle.models.stats import UserStats


@dataclass(frozen=True)
class AchievementInput:
    """What achievements are judged on."""

    stats: UserStats
    total_winnings: Decimal = Decimal(0)


@dataclass(frozen=True)
class Achievement:
    id: str
    name: str
    description: str
    criteria: Callable[[AchievementInput], bool]
    progress: Callable[[AchievementInput], float]
    goal: Callable[[AchievementInput], float]


class AchievementProgress(BaseModel):
    """Evaluated achievement for display."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    unlocked: bool
    progress: float
    goal: float


ORACLE_MIN_BETS = 10
ORACLE_MIN_ACCURACY = 75.0

ACHIEVEMENTS: tuple[Achievement, ...] = (
    Achievement(
        id="first_win",
        name="Genesis",
        description="Founding Member",
        criteria=lambda a: a.stats.wins >= 1,
        progress=lambda a: a.stats.wins,
        goal=lambda a: 1,
    ),
    Achievement(
        id="hot_streak",
        name="Consistent Winner",
        description="Achieve 5 wins",
        criteria=lambda a: a.stats.wins >= 5,
        progress=lambda a: a.stats.wins,
        goal=lambda a: 5,
    ),
    Achievement(
        id="intuitive",
        name="Intuitive",
        description="Trust Score > 100",
        criteria=lambda a: a.stats.trust_score >= 100,
        progress=lambda a: a.stats.trust_score,
        goal=lambda a: 100,
    ),
    Achievement(
        id="sharp_predictor",
        name="Oracle",
        description="75% accuracy over 10+ bets",
        criteria=lambda a: a.stats.accuracy >= ORACLE_MIN_ACCURACY and a.stats.total_bets >= ORACLE_MIN_BETS,
        # Counts bets until the minimum is reached, then tracks accuracy
        progress=lambda a: a.stats.total_bets if a.stats.total_bets < ORACLE_MIN_BETS else a.stats.accuracy,
        goal=lambda a: ORACLE_MIN_BETS if a.stats.total_bets < ORACLE_MIN_BETS else ORACLE_MIN_ACCURACY,
    ),
    Achievement(
        id="whale_slayer",
        name="Whale Slayer",
        description="Win > 50k",
        criteria=lambda a: a.total_winnings > 50_000,
        progress=lambda a: float(a.total_winnings),
        goal=lambda a: 50_000,
    ),
)


def evaluate_achievements(
    stats: UserStats,
    total_winnings: Decimal = Decimal(0),
) -> list[AchievementProgress]:
    """Evaluate every achievement in catalogue order."""
    data = AchievementInput(stats=stats, total_winnings=total_winnings)
    return [
        AchievementProgress(
            id=a.id,
            name=a.name,
            description=a.description,
            unlocked=a.criteria(data),
            progress=float(a.progress(data)),
            goal=float(a.goal(data)),
        )
        for a in ACHIEVEMENTS
    ]
