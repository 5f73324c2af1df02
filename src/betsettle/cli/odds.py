"""Odds subcommand: show, preview."""

from __future__ import annotations

import typer

from betsettle.cli.common import get_reader
from betsettle.errors import ValidationError
from betsettle.models.event import Event, Side
from betsettle.settlement.odds import compute_potential_winnings, event_odds, pool_shares

app = typer.Typer(help="Pool odds and payout previews")


def _find_event(ctx: typer.Context, event_id: str) -> Event:
    for event in get_reader(ctx).get_all_events():
        if event.id == event_id:
            return event
    typer.echo(f"Event not found: {event_id}")
    raise typer.Exit(1)


@app.command("show")
def show(
    ctx: typer.Context,
    event_id: str = typer.Argument(..., help="Event ID"),
) -> None:
    """Show implied odds and pool split for an event."""
    event = _find_event(ctx, event_id)
    yes_odds, no_odds = event_odds(event)
    yes_pct, no_pct = pool_shares(event)
    typer.echo(f"Event {event.id}: {event.question}  [{event.status.value}]")
    typer.echo(f"Pool: {event.total_pool}  (YES {event.outcomes.yes} / NO {event.outcomes.no})")
    typer.echo(f"YES  {yes_odds:.2f}x  {yes_pct:.0f}%")
    typer.echo(f"NO   {no_odds:.2f}x  {no_pct:.0f}%")


@app.command("preview")
def preview(
    ctx: typer.Context,
    event_id: str = typer.Argument(..., help="Event ID"),
    side: Side = typer.Option(..., "--side", help="YES or NO"),
    stake: float = typer.Option(..., "--stake", help="Stake in tokens"),
) -> None:
    """Estimate the payout of a new stake (fee not included)."""
    event = _find_event(ctx, event_id)
    try:
        winnings = compute_potential_winnings(event, side, stake)
    except ValidationError as e:
        typer.echo(str(e))
        raise typer.Exit(1)
    typer.echo(f"Potential winnings: {winnings:.2f} (estimate)")
