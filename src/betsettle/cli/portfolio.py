"""Portfolio subcommand: report, claims."""

from __future__ import annotations

import typer

from betsettle.cli.common import fmt_amount, get_user_snapshot
from betsettle.errors import EngineError
from betsettle.portfolio.aggregator import aggregate_portfolio
from betsettle.portfolio.history import build_bet_history, split_active_history
from betsettle.ranking.stats import compute_user_stats
from betsettle.ranking.trust import get_rank, next_rank
from betsettle.settlement.claims import list_claimables, total_claimable

app = typer.Typer(help="User bet history, PnL and claimable funds")


@app.command("report")
def report(
    ctx: typer.Context,
    address: str = typer.Argument(..., help="Wallet address"),
) -> None:
    """Show bet history, portfolio stats, rank and claimable funds for a wallet."""
    settings = ctx.obj["settings"]
    try:
        snap = get_user_snapshot(ctx, address)
        history = build_bet_history(
            snap.events, snap.user_bets, snap.fee_bps, strict=settings.strict_two_sided
        )
        stats = compute_user_stats(snap.events, snap.user_bets, user_id=address)
    except EngineError as e:
        typer.echo(f"Cannot build report: {e}")
        raise typer.Exit(1)
    portfolio = aggregate_portfolio(history)
    active, settled = split_active_history(history)

    typer.echo(f"Wallet: {address}")
    typer.echo(f"Active bets: {len(active)}")
    for b in active:
        typer.echo(f"  {b.event_id:<10} {b.user_bet.value:<3} {fmt_amount(b.staked_amount):>12}  {b.event_question[:50]}")
    typer.echo(f"History: {len(settled)}")
    for b in settled:
        mark = "~" if b.is_estimate else " "
        typer.echo(
            f"  {b.event_id:<10} {b.user_bet.value:<3} {fmt_amount(b.staked_amount):>12} "
            f"{b.outcome.value:<10} {fmt_amount(b.pnl):>12}{mark} {b.event_question[:40]}"
        )
    typer.echo(f"Net PnL: {fmt_amount(portfolio.net_pnl)}  Volume: {fmt_amount(portfolio.total_volume)}")
    typer.echo(f"Win rate: {portfolio.win_rate:.1f}%  Longest streak: {portfolio.longest_streak} wins")
    rank = get_rank(stats.trust_score)
    upcoming = next_rank(stats.trust_score)
    line = f"Trust score: {stats.trust_score}  Rank: {rank.name}"
    if upcoming is not None:
        line += f"  (next: {upcoming.name} at {upcoming.score})"
    typer.echo(line)
    items = list_claimables(snap.events, snap.user_bets, snap.fee_bps)
    typer.echo(f"Claimable: {len(items)}")
    for item in items:
        mark = "~" if item.is_estimate else " "
        typer.echo(f"  {item.event_id:<10} {item.kind.value:<9} {fmt_amount(item.amount):>12}{mark}")
    typer.echo(f"Total claimable: {fmt_amount(total_claimable(items))}")
    if snap.fee_bps is None:
        typer.echo("~ payout is an estimate: platform fee unavailable")


@app.command("claims")
def claims(
    ctx: typer.Context,
    address: str = typer.Argument(..., help="Wallet address"),
) -> None:
    """List unclaimed winnings and refunds."""
    try:
        snap = get_user_snapshot(ctx, address)
    except EngineError as e:
        typer.echo(f"Cannot list claims: {e}")
        raise typer.Exit(1)
    items = list_claimables(snap.events, snap.user_bets, snap.fee_bps)
    if not items:
        typer.echo("Nothing to claim.")
        return
    for item in items:
        mark = " (estimate)" if item.is_estimate else ""
        typer.echo(f"  {item.event_id:<10} {item.kind.value:<9} {fmt_amount(item.amount):>12}{mark}")
    typer.echo(f"Total claimable: {fmt_amount(total_claimable(items))}")
