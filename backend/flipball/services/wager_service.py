"""Blue box game service."""

import logging
from typing import Any, Optional

from flipball.database.repositories import AccountRepository
from flipball.models import Amount
from flipball.services.locks import AccountLocks
from flipball.services.wager_engine import (
    PlayOutcome,
    RandomSource,
    SystemRandomSource,
    play_round,
)
from flipball.utils.errors import AccountNotFound

logger = logging.getLogger(__name__)


class WagerService:
    """
    Plays rounds of the blue box game against an account's ledger.
    """

    def __init__(
        self,
        locks: Optional[AccountLocks] = None,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        self.locks = locks or AccountLocks()
        self.random_source = random_source or SystemRandomSource()

    async def play(
        self,
        repo: AccountRepository,
        email: str,
        bet: Amount,
        choice: Any,
    ) -> PlayOutcome:
        """
        Play one round for the account.

        Process:
        1. Load the account under its lock
        2. Check attempts and balance (nothing is written if either fails)
        3. Pick the blue box and settle the bet
        4. Persist balance, attempts and totalAttemptsPlayed together
        """
        async with self.locks.for_account(email):
            account = await repo.find_by_email(email)
            if account is None:
                raise AccountNotFound()

            outcome = play_round(account, bet, choice, self.random_source)

            updated = await repo.update(email, outcome.ledger())
            if updated is None:
                raise AccountNotFound()

        logger.info(
            f"Play {email} #{outcome.attempt_number}: bet {bet} on {choice}, "
            f"blue box {outcome.blue_box}, {'win' if outcome.win else 'loss'} "
            f"-> balance {outcome.new_balance}"
        )
        return outcome
