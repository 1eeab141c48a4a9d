"""Per-account mutation locks."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict


class AccountLocks:
    """
    One `asyncio.Lock` per email, held only while someone uses it.

    Every read-modify-write of a ledger runs under the account's lock so two
    plays or top-ups for the same email cannot interleave within a process.
    A lock is dropped once its last holder or waiter leaves.
    """

    def __init__(self) -> None:
        self._locks: Dict[str, asyncio.Lock] = {}
        self._users: Dict[str, int] = {}

    @asynccontextmanager
    async def for_account(self, email: str) -> AsyncIterator[None]:
        lock = self._locks.get(email)
        if lock is None:
            lock = self._locks[email] = asyncio.Lock()
            self._users[email] = 0
        self._users[email] += 1
        try:
            async with lock:
                yield
        finally:
            self._users[email] -= 1
            if self._users[email] == 0:
                del self._users[email]
                del self._locks[email]

    def __len__(self) -> int:
        return len(self._locks)
