"""Unit tests for the per-account lock registry."""

import asyncio

import pytest

from flipball.services import AccountLocks, WagerService
from flipball.utils.errors import AccountNotFound
from tests.fakes import ScriptedRandomSource


def test_registry_is_empty_after_plays_for_unknown_emails(repo) -> None:
    locks = AccountLocks()
    service = WagerService(locks=locks, random_source=ScriptedRandomSource())

    async def run():
        for i in range(200):
            with pytest.raises(AccountNotFound):
                await service.play(repo, f"ghost{i}@example.com", 1, 1)

    asyncio.run(run())

    assert len(locks) == 0


def test_lock_is_kept_while_held_and_serializes_holders() -> None:
    locks = AccountLocks()
    order = []

    async def hold(name: str, release: asyncio.Event) -> None:
        async with locks.for_account("ada@example.com"):
            order.append(f"{name} in")
            await release.wait()
            order.append(f"{name} out")

    async def run():
        first_release, second_release = asyncio.Event(), asyncio.Event()
        first = asyncio.create_task(hold("first", first_release))
        second = asyncio.create_task(hold("second", second_release))
        await asyncio.sleep(0)

        assert len(locks) == 1
        assert order == ["first in"]

        first_release.set()
        second_release.set()
        await asyncio.gather(first, second)

    asyncio.run(run())

    assert order == ["first in", "first out", "second in", "second out"]
    assert len(locks) == 0


def test_lock_is_released_when_body_raises() -> None:
    locks = AccountLocks()

    async def run():
        with pytest.raises(RuntimeError):
            async with locks.for_account("ada@example.com"):
                raise RuntimeError("boom")

    asyncio.run(run())

    assert len(locks) == 0
