"""Blue box outcome selection and payout calculations.

These pure functions decide which of the three boxes is blue for a given
attempt and compute the ledger after a play. Persistence and locking live
in ``wager_service``.

Odd attempts draw the blue box at random. Even attempts walk the fixed
cycle 2, 1, 3, so every second play is predictable from the attempt count.
"""

import random
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Sequence

from flipball.models import Account, Amount
from flipball.utils.errors import InsufficientBalance, NoAttemptsLeft

NUM_BOXES = 3
EVEN_ATTEMPT_SEQUENCE: Sequence[int] = (2, 1, 3)
PAYOUT_MULTIPLIER = 5


class RandomSource(Protocol):
    """Source of uniformly distributed integers."""

    def uniform_int(self, low: int, high: int) -> int:
        """Return an integer in [low, high], both inclusive."""
        ...


class SystemRandomSource:
    """`RandomSource` backed by a private `random.Random` instance."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def uniform_int(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)


@dataclass(frozen=True)
class PlayOutcome:
    """Result of one play round together with the ledger it produces."""

    attempt_number: int
    blue_box: int
    win: bool
    win_amount: Amount
    lost: Amount
    new_balance: Amount
    remaining_attempts: int

    def ledger(self) -> dict:
        """Ledger fields to persist for this outcome."""
        return {
            "balance": self.new_balance,
            "attempts": self.remaining_attempts,
            "total_attempts_played": self.attempt_number,
        }


def next_attempt_number(total_attempts_played: int) -> int:
    """1-based number of the attempt about to be played."""
    return (total_attempts_played or 0) + 1


def select_blue_box(attempt_number: int, random_source: RandomSource) -> int:
    """Pick the blue box (1-based) for an attempt."""
    if attempt_number < 1:
        raise ValueError(f"Attempt number must be at least 1, got {attempt_number}")

    if attempt_number % 2 == 0:
        index = (attempt_number // 2 - 1) % len(EVEN_ATTEMPT_SEQUENCE)
        return EVEN_ATTEMPT_SEQUENCE[index]

    return random_source.uniform_int(1, NUM_BOXES)


def coerce_choice(choice: Any) -> Optional[float]:
    """
    Numeric value of a box choice, converted like JavaScript's ``Number()``.

    Decimal strings ("2", " 2.0 ") and unsigned hex/binary/octal literals
    ("0x2", "0b10", "0o2") count, a blank string is 0, and anything else is
    None.
    """
    if isinstance(choice, (int, float)):
        return choice
    if isinstance(choice, str):
        text = choice.strip()
        if not text:
            return 0
        # Python accepts digit separators, Number() does not.
        if "_" in text:
            return None
        if text[:2].lower() in ("0x", "0b", "0o"):
            try:
                return int(text, 0)
            except ValueError:
                return None
        try:
            return float(text)
        except ValueError:
            return None
    return None


def check_can_play(account: Account, bet: Amount) -> None:
    """Raise if the account may not place this bet."""
    if account.attempts <= 0:
        raise NoAttemptsLeft()
    if bet > account.balance:
        raise InsufficientBalance()


def play_round(
    account: Account,
    bet: Amount,
    choice: Any,
    random_source: RandomSource,
) -> PlayOutcome:
    """
    Play one round for `account` without touching storage.

    Preconditions are checked first, so a failed play leaves nothing to
    persist. Winning pays ``bet * 5``, losing forfeits the bet.
    """
    check_can_play(account, bet)

    attempt_number = next_attempt_number(account.total_attempts_played)
    blue_box = select_blue_box(attempt_number, random_source)

    win = coerce_choice(choice) == blue_box
    win_amount = bet * PAYOUT_MULTIPLIER if win else 0
    lost = 0 if win else bet

    return PlayOutcome(
        attempt_number=attempt_number,
        blue_box=blue_box,
        win=win,
        win_amount=win_amount,
        lost=lost,
        new_balance=account.balance + win_amount - lost,
        remaining_attempts=account.attempts - 1,
    )
