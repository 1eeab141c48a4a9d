"""
MongoAccountRepository

MongoDB operations for the 'users' collection through Beanie.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from beanie import UpdateResponse
from beanie.operators import Set
from pymongo.errors import DuplicateKeyError, PyMongoError

from flipball.database.base import utc_now
from flipball.database.repositories.base import LEDGER_FIELDS
from flipball.models import Account, AccountDocument
from flipball.utils.errors import DuplicateUser, StorageFailure

logger = logging.getLogger(__name__)


class MongoAccountRepository:
    """Beanie-backed implementation of `AccountRepository`."""

    async def create(self, account: Account) -> Account:
        document = AccountDocument(
            firstname=account.firstname,
            lastname=account.lastname,
            email=account.email,
            password=account.password,
            balance=account.balance,
            attempts=account.attempts,
            total_attempts_played=account.total_attempts_played,
        )
        try:
            await document.insert()
        except DuplicateKeyError as e:
            raise DuplicateUser() from e
        except PyMongoError as e:
            raise StorageFailure(f"Failed to create account {account.email}") from e
        return document.to_domain()

    async def find_by_email(self, email: str) -> Optional[Account]:
        try:
            document = await AccountDocument.find_one(AccountDocument.email == email)
        except PyMongoError as e:
            raise StorageFailure(f"Failed to load account {email}") from e
        return document.to_domain() if document else None

    async def update(self, email: str, fields: Dict[str, Any]) -> Optional[Account]:
        unknown = set(fields) - LEDGER_FIELDS
        if unknown:
            raise ValueError(f"Not a ledger field: {', '.join(sorted(unknown))}")

        # Stored key names follow the document aliases (totalAttemptsPlayed).
        changes: Dict[str, Any] = {
            AccountDocument.model_fields[name].alias or name: value
            for name, value in fields.items()
        }
        changes["updated_at"] = utc_now()

        try:
            document = await AccountDocument.find_one(
                AccountDocument.email == email
            ).update(Set(changes), response_type=UpdateResponse.NEW_DOCUMENT)
        except PyMongoError as e:
            raise StorageFailure(f"Failed to update account {email}") from e

        if document is None:
            return None
        logger.debug(f"Updated account {email}: {sorted(fields)}")
        return document.to_domain()
