"""
AccountRepository protocol.

Methods:
- create(account) -> Account: Insert account, DuplicateUser if the email exists
- find_by_email(email) -> Optional[Account]
- update(email, fields) -> Optional[Account]: Partial ledger update

Implementations translate storage errors into StorageFailure.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

from flipball.models import Account

# Account fields that update() is allowed to overwrite.
LEDGER_FIELDS = frozenset({"balance", "attempts", "total_attempts_played"})


class AccountRepository(Protocol):
    """
    Abstraction over account persistence.

    Implementations are responsible for:
    - Mapping between stored documents and the `Account` domain model.
    - Hiding any driver details from the service layer.
    """

    async def create(self, account: Account) -> Account:
        """Persist a new account. Raises DuplicateUser if the email is taken."""

        ...

    async def find_by_email(self, email: str) -> Optional[Account]:
        """Return the account with the given email, or None if not found."""

        ...

    async def update(self, email: str, fields: Dict[str, Any]) -> Optional[Account]:
        """
        Overwrite the given ledger fields and return the updated account,
        or None if no account has that email.
        """

        ...
