"""Helpers shared by subcommands."""

from __future__ import annotations

import typer

from betsettle.chain.base import ChainSnapshot, take_snapshot
from betsettle.chain.mock import MockChainReader
from betsettle.errors import ValidationError


def get_reader(ctx: typer.Context) -> MockChainReader:
    """Load the configured snapshot file or exit with an error."""
    path = ctx.obj["snapshot_path"]
    if not path.exists():
        typer.echo(f"Snapshot not found: {path}")
        raise typer.Exit(1)
    return MockChainReader.from_json(path)


def get_default_fee(ctx: typer.Context) -> int | None:
    """[settlement] default_fee_bps, or exit with an error if it is malformed."""
    try:
        return ctx.obj["settings"].default_fee_bps
    except ValidationError as e:
        typer.echo(f"Invalid config [settlement] default_fee_bps: {e}")
        raise typer.Exit(1)


def get_user_snapshot(ctx: typer.Context, address: str) -> ChainSnapshot:
    return take_snapshot(get_reader(ctx), address, default_fee_bps=get_default_fee(ctx))


def fmt_amount(value: object) -> str:
    return f"{value:,.2f}"
