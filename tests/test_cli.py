"""CLI commands against the fixture snapshot."""

import pytest
from typer.testing import CliRunner

from betsettle.cli.app import app

runner = CliRunner()


@pytest.fixture
def invoke(tmp_path, snapshot_path):
    def _invoke(*args):
        result = runner.invoke(app, ["--config-dir", str(tmp_path), "--snapshot", str(snapshot_path), *args])
        assert result.exit_code == 0, result.output
        return result.output

    return _invoke


def test_odds_show(invoke):
    out = invoke("odds", "show", "1")
    assert "YES  1.67x  60%" in out
    assert "NO   2.50x  40%" in out


def test_odds_preview(invoke):
    out = invoke("odds", "preview", "1", "--side", "YES", "--stake", "1000")
    assert "1571.43" in out


def test_portfolio_report(invoke):
    out = invoke("portfolio", "report", "0xA11CE")
    assert "Active bets: 1" in out
    assert "History: 4" in out
    assert "Net PnL: 416.67  Volume: 2,050.00" in out
    assert "Win rate: 66.7%  Longest streak: 2 wins" in out
    assert "Trust score: 8  Rank: Initiate  (next: Analyst at 30)" in out
    assert "Claimable: 2" in out
    assert "Total claimable: 2,166.67" in out


def test_portfolio_claims(invoke):
    out = invoke("portfolio", "claims", "0xa11ce")
    assert "Winnings" in out and "1,666.67" in out
    assert "Refund" in out and "500.00" in out
    assert "Total claimable: 2,166.67" in out


def test_leaderboard_excludes_users_without_settled_bets(invoke):
    out = invoke("leaderboard", "show")
    assert out.index("0xa11ce") < out.index("0xca201") < out.index("0xb0b")
    assert "0xda7e" not in out


def test_achievements(invoke):
    out = invoke("leaderboard", "achievements", "0xa11ce")
    assert "[x] Genesis" in out
    assert "[ ] Whale Slayer" in out


def test_missing_snapshot(tmp_path):
    result = runner.invoke(
        app, ["--config-dir", str(tmp_path), "--snapshot", str(tmp_path / "none.json"), "odds", "show", "1"]
    )
    assert result.exit_code == 1
    assert "Snapshot not found" in result.output


@pytest.mark.parametrize("raw", ["2.5", '"abc"', "20000"])
@pytest.mark.parametrize("command", [["portfolio", "report", "0xa11ce"], ["leaderboard", "show"]])
def test_malformed_default_fee_exits_with_message(tmp_path, snapshot_path, raw, command):
    (tmp_path / "default.toml").write_text(f"[settlement]\ndefault_fee_bps = {raw}\n")
    result = runner.invoke(app, ["--config-dir", str(tmp_path), "--snapshot", str(snapshot_path), *command])
    assert result.exit_code == 1
    assert "Invalid config [settlement] default_fee_bps" in result.output
    assert not isinstance(result.exception, ValueError)
