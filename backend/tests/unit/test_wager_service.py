"""Unit tests for playing rounds against the stored ledger."""

import asyncio

import pytest

from flipball.models import Account
from flipball.services import AccountLocks, WagerService
from flipball.utils.errors import AccountNotFound, InsufficientBalance, NoAttemptsLeft
from tests.fakes import ScriptedRandomSource

EMAIL = "ada@example.com"


def seed(repo, **ledger) -> Account:
    values = {"email": EMAIL, "password": "secret", "balance": 100, "attempts": 0}
    values.update(ledger)
    return asyncio.run(repo.create(Account(**values)))


def test_play_persists_ledger(repo, wager_service) -> None:
    seed(repo, balance=100, attempts=1, total_attempts_played=1)

    outcome = asyncio.run(wager_service.play(repo, EMAIL, 100, 2))

    assert outcome.win is True
    assert outcome.new_balance == 600
    stored = asyncio.run(repo.find_by_email(EMAIL))
    assert stored.balance == 600
    assert stored.attempts == 0
    assert stored.total_attempts_played == 2


def test_failed_play_does_not_touch_ledger(repo, wager_service) -> None:
    seed(repo, balance=20, attempts=3, total_attempts_played=4)

    with pytest.raises(InsufficientBalance):
        asyncio.run(wager_service.play(repo, EMAIL, 21, 1))

    stored = asyncio.run(repo.find_by_email(EMAIL))
    assert stored.balance == 20
    assert stored.attempts == 3
    assert stored.total_attempts_played == 4


def test_play_without_attempts(repo, wager_service) -> None:
    seed(repo, attempts=0)

    with pytest.raises(NoAttemptsLeft):
        asyncio.run(wager_service.play(repo, EMAIL, 1, 1))

    assert asyncio.run(repo.find_by_email(EMAIL)).attempts == 0


def test_play_unknown_account(repo, wager_service) -> None:
    with pytest.raises(AccountNotFound):
        asyncio.run(wager_service.play(repo, "nobody@example.com", 1, 1))


def test_consecutive_plays_interleave_random_and_fixed_boxes(repo, scripted_random, wager_service) -> None:
    seed(repo, balance=1000, attempts=6)
    scripted_random.values = [1, 2, 3]

    outcomes = [asyncio.run(wager_service.play(repo, EMAIL, 10, 1)) for _ in range(6)]

    assert [o.attempt_number for o in outcomes] == [1, 2, 3, 4, 5, 6]
    assert [o.blue_box for o in outcomes] == [1, 2, 2, 1, 3, 3]
    assert [o.win for o in outcomes] == [True, False, False, True, False, False]
    assert len(scripted_random.calls) == 3

    stored = asyncio.run(repo.find_by_email(EMAIL))
    # two wins of +50, four losses of -10
    assert stored.balance == 1000 + 2 * 50 - 4 * 10
    assert stored.attempts == 0
    assert stored.total_attempts_played == 6


def test_concurrent_plays_never_overdraw_attempts(repo) -> None:
    seed(repo, balance=1000, attempts=2)
    service = WagerService(locks=AccountLocks(), random_source=ScriptedRandomSource([3, 3, 3]))

    async def run():
        return await asyncio.gather(
            *(service.play(repo, EMAIL, 10, 1) for _ in range(5)),
            return_exceptions=True,
        )

    results = asyncio.run(run())

    played = [r for r in results if not isinstance(r, Exception)]
    rejected = [r for r in results if isinstance(r, NoAttemptsLeft)]
    assert len(played) == 2
    assert len(rejected) == 3
    assert sorted(o.attempt_number for o in played) == [1, 2]

    stored = asyncio.run(repo.find_by_email(EMAIL))
    assert stored.attempts == 0
    assert stored.total_attempts_played == 2
