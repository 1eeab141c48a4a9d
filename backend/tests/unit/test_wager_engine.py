"""Unit tests for blue box selection and round settlement."""

from collections import Counter

import pytest

from flipball.models import Account
from flipball.services.wager_engine import (
    SystemRandomSource,
    coerce_choice,
    play_round,
    select_blue_box,
)
from flipball.utils.errors import InsufficientBalance, NoAttemptsLeft
from tests.fakes import ScriptedRandomSource


def make_account(**ledger) -> Account:
    values = {"email": "ada@example.com", "balance": 100, "attempts": 5, "total_attempts_played": 0}
    values.update(ledger)
    return Account(**values)


def test_even_attempts_follow_fixed_cycle() -> None:
    source = ScriptedRandomSource()

    boxes = [select_blue_box(n, source) for n in (2, 4, 6, 8, 10, 12, 14)]

    assert boxes == [2, 1, 3, 2, 1, 3, 2]
    assert source.calls == []


def test_odd_attempts_draw_from_random_source() -> None:
    source = ScriptedRandomSource([3, 1, 2])

    boxes = [select_blue_box(n, source) for n in (1, 3, 5)]

    assert boxes == [3, 1, 2]
    assert source.calls == [(1, 3), (1, 3), (1, 3)]


def test_attempt_number_must_be_positive() -> None:
    with pytest.raises(ValueError):
        select_blue_box(0, ScriptedRandomSource())


def test_system_random_source_covers_all_boxes() -> None:
    source = SystemRandomSource(seed=7)

    counts = Counter(select_blue_box(1, source) for _ in range(3000))

    assert set(counts) == {1, 2, 3}
    assert all(800 < count < 1200 for count in counts.values())


def test_seeded_random_source_is_reproducible() -> None:
    first = SystemRandomSource(seed=42)
    second = SystemRandomSource(seed=42)

    assert [first.uniform_int(1, 3) for _ in range(20)] == [
        second.uniform_int(1, 3) for _ in range(20)
    ]


def test_second_attempt_hit_pays_five_times_bet() -> None:
    account = make_account(balance=100, attempts=1, total_attempts_played=1)

    outcome = play_round(account, 100, 2, ScriptedRandomSource())

    assert outcome.attempt_number == 2
    assert outcome.blue_box == 2
    assert outcome.win is True
    assert outcome.win_amount == 500
    assert outcome.lost == 0
    assert outcome.new_balance == 600
    assert outcome.remaining_attempts == 0
    assert outcome.ledger() == {"balance": 600, "attempts": 0, "total_attempts_played": 2}


def test_miss_forfeits_bet() -> None:
    account = make_account(balance=250, attempts=3, total_attempts_played=0)

    outcome = play_round(account, 40, 1, ScriptedRandomSource([3]))

    assert outcome.attempt_number == 1
    assert outcome.blue_box == 3
    assert outcome.win is False
    assert outcome.win_amount == 0
    assert outcome.lost == 40
    assert outcome.new_balance == 210
    assert outcome.remaining_attempts == 2


def test_bet_of_whole_balance_is_allowed() -> None:
    account = make_account(balance=50, attempts=1)

    outcome = play_round(account, 50, 1, ScriptedRandomSource([2]))

    assert outcome.new_balance == 0


def test_no_attempts_left_is_checked_before_balance() -> None:
    account = make_account(balance=10, attempts=0)

    with pytest.raises(NoAttemptsLeft):
        play_round(account, 1000, 1, ScriptedRandomSource())


def test_bet_above_balance_is_rejected() -> None:
    source = ScriptedRandomSource([1])
    account = make_account(balance=10, attempts=2)

    with pytest.raises(InsufficientBalance):
        play_round(account, 11, 1, source)

    assert source.calls == []


def test_numeric_string_choice_counts() -> None:
    account = make_account(total_attempts_played=3)  # attempt 4 -> box 1

    outcome = play_round(account, 10, "1", ScriptedRandomSource())

    assert outcome.win is True


@pytest.mark.parametrize(
    "choice, expected",
    [
        (2, 2),
        (2.0, 2.0),
        ("3", 3.0),
        (" 1 ", 1.0),
        ("", 0),
        ("0x2", 2),
        ("0B11", 3),
        ("0o1", 1),
        ("0xg", None),
        ("1_0", None),
        ("blue", None),
        (None, None),
    ],
)
def test_coerce_choice(choice, expected) -> None:
    assert coerce_choice(choice) == expected


def test_unparseable_choice_always_loses() -> None:
    account = make_account(total_attempts_played=1)

    outcome = play_round(account, 10, "box two", ScriptedRandomSource())

    assert outcome.win is False
    assert outcome.new_balance == 90


def test_hex_string_choice_counts() -> None:
    account = make_account(total_attempts_played=5)  # attempt 6 -> box 3

    outcome = play_round(account, 10, "0x3", ScriptedRandomSource())

    assert outcome.win is True
