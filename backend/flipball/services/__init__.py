"""Services module."""

from flipball.services.account_service import (
    ATTEMPTS_PER_TOP_UP,
    MIN_TOP_UP,
    AccountService,
)
from flipball.services.credentials import CredentialVerifier, PlaintextVerifier
from flipball.services.locks import AccountLocks
from flipball.services.wager_engine import (
    EVEN_ATTEMPT_SEQUENCE,
    NUM_BOXES,
    PAYOUT_MULTIPLIER,
    PlayOutcome,
    RandomSource,
    SystemRandomSource,
    play_round,
    select_blue_box,
)
from flipball.services.wager_service import WagerService

__all__ = [
    "ATTEMPTS_PER_TOP_UP",
    "AccountLocks",
    "AccountService",
    "CredentialVerifier",
    "EVEN_ATTEMPT_SEQUENCE",
    "MIN_TOP_UP",
    "NUM_BOXES",
    "PAYOUT_MULTIPLIER",
    "PlaintextVerifier",
    "PlayOutcome",
    "RandomSource",
    "SystemRandomSource",
    "WagerService",
    "play_round",
    "select_blue_box",
]
