"""Portfolio aggregation and history building."""

import random
import time
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from betsettle.errors import InconsistentInputError
from betsettle.models import BetOutcome, EventStatus, PnLBet, PortfolioStats, Side, UserBet
from betsettle.portfolio.aggregator import aggregate_portfolio, longest_win_streak, settlement_order, total_winnings
from betsettle.portfolio.history import build_bet_history, split_active_history
from factories import make_event, make_row, no_bet, yes_bet

W, L, P = BetOutcome.WON, BetOutcome.LOST, BetOutcome.PENDING


def test_empty_history():
    assert aggregate_portfolio([]) == PortfolioStats()


def test_totals_over_all_bets():
    rows = [
        make_row(W, 1, stake=100, pnl=50),
        make_row(L, 2, stake=40, pnl=-40),
        make_row(P, 3, stake=25, pnl=0),
        make_row(BetOutcome.REFUNDABLE, 4, stake=10, pnl=0),
        make_row(BetOutcome.CLAIMED, 5, stake=5, pnl=1),
    ]
    stats = aggregate_portfolio(rows)
    assert stats.net_pnl == Decimal(11)
    assert stats.total_volume == Decimal(180)
    assert stats.wins == 2
    assert stats.total_bets == 3
    assert stats.win_rate == pytest.approx(200 / 3)


def test_win_only_streak_is_length():
    rows = [make_row(W, d) for d in range(1, 8)]
    assert aggregate_portfolio(rows).longest_streak == 7


def test_alternating_streak_is_one():
    rows = [make_row(W if d % 2 else L, d) for d in range(1, 11)]
    assert aggregate_portfolio(rows).longest_streak == 1


def test_pending_and_refunds_do_not_break_streak():
    rows = [make_row(W, 1), make_row(P, 2), make_row(BetOutcome.REFUNDED, 3), make_row(BetOutcome.CLAIMED, 4)]
    assert aggregate_portfolio(rows).longest_streak == 2


def test_streak_ending_on_last_bet_is_counted():
    assert longest_win_streak([make_row(L, 1), make_row(W, 2), make_row(W, 3), make_row(W, 4)]) == 3


def test_unsorted_input_is_sorted_by_date():
    # Chronologically W, L, W; in input order it would read W, W, L
    rows = [make_row(W, 1), make_row(W, 3), make_row(L, 2)]
    assert aggregate_portfolio(rows).longest_streak == 1


def test_output_independent_of_input_order():
    rows = [make_row(W if d % 3 else L, d, stake=d, pnl=d - 5) for d in range(1, 20)]
    expected = aggregate_portfolio(rows)
    rng = random.Random(7)
    for _ in range(5):
        shuffled = rows[:]
        rng.shuffle(shuffled)
        assert aggregate_portfolio(shuffled) == expected


@pytest.fixture
def far_east_local_time(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset unavailable")
    monkeypatch.setenv("TZ", "Asia/Tokyo")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_naive_dates_are_ordered_as_utc(far_east_local_time):
    # UTC order is L 11:00, W 12:00 (naive), W 13:00
    rows = [
        PnLBet(event_id="a", outcome=W, date=datetime(2024, 1, 1, 13, tzinfo=timezone.utc)),
        PnLBet(event_id="n", outcome=W, date=datetime(2024, 1, 1, 12)),
        PnLBet(event_id="b", outcome=L, date=datetime(2024, 1, 1, 11, tzinfo=timezone.utc)),
    ]
    assert [r.event_id for r in sorted(rows, key=settlement_order)] == ["b", "n", "a"]
    assert aggregate_portfolio(rows).longest_streak == 2


def test_no_settled_bets_gives_zero_win_rate():
    stats = aggregate_portfolio([make_row(P, 1, stake=30)])
    assert stats.win_rate == 0
    assert stats.total_volume == Decimal(30)


def test_build_history_skips_unstaked_events():
    resolved = datetime(2024, 2, 1, tzinfo=timezone.utc)
    events = [
        make_event(60, 40, EventStatus.FINISHED, Side.YES, event_id="a", resolution_date=resolved),
        make_event(10, 10, event_id="b"),
        make_event(5, 5, event_id="c"),
    ]
    bets = [yes_bet(60), None, UserBet()]
    history = build_bet_history(events, bets, fee_bps=0)
    assert len(history) == 1
    assert history[0].event_id == "a"
    assert history[0].date == resolved
    assert history[0].winnings == Decimal(100)


def test_build_history_rejects_misaligned_feed():
    with pytest.raises(InconsistentInputError):
        build_bet_history([make_event(1, 1)], [])


def test_split_active_history_newest_first():
    rows = [make_row(W, 1), make_row(P, 2), make_row(L, 5), make_row(P, 9)]
    active, settled = split_active_history(rows)
    assert [r.event_id for r in active] == ["ev9", "ev2"]
    assert [r.event_id for r in settled] == ["ev5", "ev1"]


def test_total_winnings_counts_wins_only():
    events = [
        make_event(50, 50, EventStatus.FINISHED, Side.YES, event_id="x"),
        make_event(20, 0, EventStatus.CANCELED, event_id="y"),
        make_event(50, 50, EventStatus.FINISHED, Side.YES, event_id="z"),
    ]
    history = build_bet_history(events, [yes_bet(50, claimed=True), yes_bet(20), no_bet(50)], fee_bps=0)
    assert total_winnings(history) == Decimal(100)
