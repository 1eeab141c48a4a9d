"""Account signup, login and ledger maintenance."""

import logging
from typing import Any, Dict, Optional

from flipball.database.repositories import AccountRepository
from flipball.models import Account, Amount
from flipball.services.credentials import CredentialVerifier, PlaintextVerifier
from flipball.services.locks import AccountLocks
from flipball.utils.errors import (
    AccountNotFound,
    BelowMinimum,
    DuplicateUser,
    InvalidCredentials,
)

logger = logging.getLogger(__name__)

MIN_TOP_UP = 1000
ATTEMPTS_PER_TOP_UP = 25


class AccountService:
    """
    Manages account creation, credential checks and ledger updates.
    """

    def __init__(
        self,
        locks: Optional[AccountLocks] = None,
        verifier: Optional[CredentialVerifier] = None,
    ) -> None:
        self.locks = locks or AccountLocks()
        self.verifier = verifier or PlaintextVerifier()

    async def create_account(
        self,
        repo: AccountRepository,
        email: str,
        firstname: Optional[str],
        lastname: Optional[str],
        password: Optional[str],
    ) -> Account:
        """Create an account with the signup ledger (balance 100, no attempts)."""
        existing = await repo.find_by_email(email)
        if existing is not None:
            raise DuplicateUser()

        account = await repo.create(
            Account(
                email=email,
                firstname=firstname,
                lastname=lastname,
                password=password,
            )
        )
        logger.info(f"Created account {email}")
        return account

    async def get_account(self, repo: AccountRepository, email: str) -> Account:
        """Load an account by email."""
        account = await repo.find_by_email(email)
        if account is None:
            raise AccountNotFound()
        return account

    async def verify(self, repo: AccountRepository, email: str, password: str) -> Account:
        """Return the account if `password` matches, else raise InvalidCredentials."""
        account = await repo.find_by_email(email)
        if account is None or not self.verifier.verify(password, account.password):
            logger.info(f"Rejected login for {email}")
            raise InvalidCredentials()
        return account

    async def update_ledger(
        self,
        repo: AccountRepository,
        email: str,
        fields: Dict[str, Any],
    ) -> Account:
        """
        Overwrite ledger fields without any checks.

        Negative balances or attempts are accepted here; only play guards them.
        """
        async with self.locks.for_account(email):
            account = await repo.update(email, fields)
        if account is None:
            raise AccountNotFound()
        logger.info(f"Ledger overwritten for {email}: {fields}")
        return account

    async def add_funds(
        self,
        repo: AccountRepository,
        email: str,
        amount: Optional[Amount],
    ) -> Account:
        """
        Credit `amount` and grant a fixed batch of attempts.

        Any top-up of at least MIN_TOP_UP grants ATTEMPTS_PER_TOP_UP attempts,
        whatever its size.
        """
        if amount is None or amount < MIN_TOP_UP:
            raise BelowMinimum()

        async with self.locks.for_account(email):
            account = await repo.find_by_email(email)
            if account is None:
                raise AccountNotFound("User not found")

            account = await repo.update(
                email,
                {
                    "balance": account.balance + amount,
                    "attempts": account.attempts + ATTEMPTS_PER_TOP_UP,
                },
            )
            if account is None:
                raise AccountNotFound("User not found")

        logger.info(
            f"Added funds for {email}: +{amount} "
            f"(balance {account.balance}, attempts {account.attempts})"
        )
        return account
