"""Leaderboard subcommand: show, achievements."""

from __future__ import annotations

import structlog
import typer

from betsettle.chain.base import take_snapshot
from betsettle.cli.common import get_default_fee, get_reader, get_user_snapshot
from betsettle.errors import EngineError
from betsettle.models.stats import UserStats
from betsettle.portfolio.aggregator import total_winnings
from betsettle.portfolio.history import build_bet_history
from betsettle.ranking.achievements import evaluate_achievements
from betsettle.ranking.leaderboard import build_leaderboard
from betsettle.ranking.stats import compute_user_stats

app = typer.Typer(help="Trust-score leaderboard and achievements")

log = structlog.get_logger(__name__)


@app.command("show")
def show(
    ctx: typer.Context,
    limit: int | None = typer.Option(None, "--limit", "-n", help="Max rows (default from config)"),
) -> None:
    """Rank every known bettor by trust score."""
    settings = ctx.obj["settings"]
    reader = get_reader(ctx)
    default_fee = get_default_fee(ctx)
    users: list[UserStats] = []
    for address in reader.get_known_users():
        try:
            snap = take_snapshot(reader, address, default_fee_bps=default_fee)
            stats = compute_user_stats(snap.events, snap.user_bets, user_id=address)
        except EngineError as e:
            # One bad record should not sink the whole board
            log.warning("leaderboard_user_skipped", user=address, error=str(e))
            continue
        if stats.total_bets == 0:
            continue
        users.append(stats)
    entries = build_leaderboard(users, limit=limit if limit is not None else settings.leaderboard_limit)
    if not entries:
        typer.echo("No ranked users.")
        return
    for entry in entries:
        u = entry.user
        typer.echo(
            f"{entry.position:>3}. {u.user_id}  score {u.trust_score:>4}  {entry.rank.name:<8} "
            f"{u.wins}W/{u.losses}L  {u.accuracy:.0f}%"
        )


@app.command("achievements")
def achievements(
    ctx: typer.Context,
    address: str = typer.Argument(..., help="Wallet address"),
) -> None:
    """Show achievement progress for a wallet."""
    try:
        snap = get_user_snapshot(ctx, address)
        stats = compute_user_stats(snap.events, snap.user_bets, user_id=address)
        history = build_bet_history(snap.events, snap.user_bets, snap.fee_bps)
    except EngineError as e:
        typer.echo(f"Cannot evaluate achievements: {e}")
        raise typer.Exit(1)
    for a in evaluate_achievements(stats, total_winnings(history)):
        status = "x" if a.unlocked else " "
        typer.echo(f"  [{status}] {a.name:<18} {a.progress:g}/{a.goal:g}  {a.description}")
