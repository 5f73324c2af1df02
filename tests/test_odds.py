"""Pool odds and win percentage."""

import math

import pytest

from betsettle.errors import ValidationError
from betsettle.models import Side
from betsettle.settlement.odds import (
    compute_odds,
    compute_potential_winnings,
    compute_win_percentage,
    event_odds,
    pool_shares,
)
from factories import make_event


def test_odds_from_pools():
    assert compute_odds(6000, 4000) == pytest.approx(10000 / 6000)
    assert compute_odds(4000, 6000) == pytest.approx(2.5)


@pytest.mark.parametrize("other", [0, 1, 250.5, 10**9])
def test_empty_side_pays_even_money(other):
    assert compute_odds(0, other) == 1


@pytest.mark.parametrize("a,b", [(1, 0), (0.001, 5), (6000, 4000), (10**12, 1)])
def test_odds_never_below_one(a, b):
    assert compute_odds(a, b) >= 1


def test_empty_pool_event():
    event = make_event(0, 0)
    assert event_odds(event) == (1.0, 1.0)
    assert compute_win_percentage(0, 0) == 50
    assert pool_shares(event) == (50.0, 50.0)


def test_win_percentage():
    assert compute_win_percentage(6000, 4000) == pytest.approx(60.0)
    assert compute_win_percentage(0, 100) == 0.0
    assert compute_win_percentage(100, 0) == 100.0


@pytest.mark.parametrize("bad", [-1, math.nan, math.inf, "abc"])
def test_invalid_pool_raises(bad):
    with pytest.raises(ValidationError):
        compute_odds(bad, 1)
    with pytest.raises(ValidationError):
        compute_win_percentage(1, bad)


def test_potential_winnings_includes_new_stake():
    event = make_event(60, 40)
    # (100 + 10) / (60 + 10) per token staked
    assert compute_potential_winnings(event, Side.YES, 10) == pytest.approx(10 * 110 / 70)
    assert compute_potential_winnings(event, Side.NO, 10) == pytest.approx(10 * 110 / 50)


def test_potential_winnings_on_empty_pool_returns_stake():
    event = make_event(0, 0)
    assert compute_potential_winnings(event, Side.YES, 25) == pytest.approx(25.0)
    assert compute_potential_winnings(event, Side.NO, 0) == 0.0
