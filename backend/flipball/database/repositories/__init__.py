"""
Repository Pattern for the account store.

Clean database abstraction layer providing:
- Testability with an in-memory repository
- Centralized query logic

Repositories:
- AccountRepository: Protocol shared by every backend
- MongoAccountRepository: Beanie/Motor backed `users` collection
- InMemoryAccountRepository: dict backed, for local runs and tests
"""

from flipball.database.repositories.accounts import MongoAccountRepository
from flipball.database.repositories.base import LEDGER_FIELDS, AccountRepository
from flipball.database.repositories.memory import InMemoryAccountRepository

__all__ = [
    "AccountRepository",
    "InMemoryAccountRepository",
    "LEDGER_FIELDS",
    "MongoAccountRepository",
]
