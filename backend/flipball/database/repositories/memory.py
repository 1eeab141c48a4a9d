"""
InMemoryAccountRepository

Dict-backed account store, selected with STORAGE_BACKEND=memory.
Data lives for the lifetime of the process.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from flipball.database.base import utc_now
from flipball.database.repositories.base import LEDGER_FIELDS
from flipball.models import Account
from flipball.utils.errors import DuplicateUser


class InMemoryAccountRepository:
    """In-process implementation of `AccountRepository`."""

    def __init__(self) -> None:
        self._accounts: Dict[str, Account] = {}

    def __len__(self) -> int:
        return len(self._accounts)

    async def create(self, account: Account) -> Account:
        if account.email in self._accounts:
            raise DuplicateUser()
        now = utc_now()
        stored = account.model_copy(update={"created_at": now, "updated_at": now})
        self._accounts[account.email] = stored
        return stored.model_copy()

    async def find_by_email(self, email: str) -> Optional[Account]:
        account = self._accounts.get(email)
        return account.model_copy() if account else None

    async def update(self, email: str, fields: Dict[str, Any]) -> Optional[Account]:
        unknown = set(fields) - LEDGER_FIELDS
        if unknown:
            raise ValueError(f"Not a ledger field: {', '.join(sorted(unknown))}")

        account = self._accounts.get(email)
        if account is None:
            return None
        updated = account.model_copy(update={**fields, "updated_at": utc_now()})
        self._accounts[email] = updated
        return updated.model_copy()
