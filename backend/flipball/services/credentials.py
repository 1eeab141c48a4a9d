"""Credential verification."""

import hmac
from typing import Optional, Protocol


class CredentialVerifier(Protocol):
    """Checks a submitted password against the stored value."""

    def verify(self, submitted: str, stored: Optional[str]) -> bool:
        ...


class PlaintextVerifier:
    """
    Exact comparison against the stored plaintext password.

    Accounts created by the original server store passwords unhashed, so a
    hashed verifier needs a data migration before it can replace this one.
    """

    def verify(self, submitted: str, stored: Optional[str]) -> bool:
        if submitted is None or stored is None:
            return False
        return hmac.compare_digest(submitted.encode("utf-8"), stored.encode("utf-8"))
