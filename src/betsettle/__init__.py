"""betsettle - pari-mutuel settlement engine: odds, payouts, portfolio PnL, trust ranking."""

from betsettle.portfolio.aggregator import aggregate_portfolio
from betsettle.ranking.leaderboard import rank_leaderboard
from betsettle.ranking.trust import compute_trust_score, get_rank
from betsettle.settlement.resolver import resolve_settlement

__all__ = [
    "resolve_settlement",
    "aggregate_portfolio",
    "compute_trust_score",
    "get_rank",
    "rank_leaderboard",
]
