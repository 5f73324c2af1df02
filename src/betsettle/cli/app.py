"""Root CLI app - entry point and command registration."""

from pathlib import Path

import typer

from betsettle.config import get_settings
from betsettle.config.settings import configure_logging

app = typer.Typer(
    name="betsettle",
    help="betsettle - Pari-mutuel odds, settlement, portfolio PnL and trust-score leaderboards.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    config_dir: Path | None = typer.Option(
        None, "--config-dir", "-C", help="Config directory (default: ./config or package config)"
    ),
    profile: str | None = typer.Option(
        None, "--profile", "-p", help="Config profile (e.g. dev) to overlay on default.toml"
    ),
    snapshot: Path | None = typer.Option(
        None, "--snapshot", "-s", help="Snapshot JSON to read (default: [snapshot].path from config)"
    ),
) -> None:
    """Configure logging and store options in context."""
    settings = get_settings(profile, config_dir)
    configure_logging(settings)
    ctx.obj = {
        "settings": settings,
        "config_dir": config_dir,
        "profile": profile,
        "snapshot_path": snapshot or Path(settings.snapshot_path),
    }


# Subcommands registered from other modules
from betsettle.cli import leaderboard, odds, portfolio  # noqa: E402

app.add_typer(odds.app, name="odds")
app.add_typer(portfolio.app, name="portfolio")
app.add_typer(leaderboard.app, name="leaderboard")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
