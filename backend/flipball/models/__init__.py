"""Database models module."""

from typing import List, Type

from beanie import Document

from flipball.models.account import (
    SIGNUP_ATTEMPTS,
    SIGNUP_BALANCE,
    Account,
    AccountDocument,
    Amount,
)


def get_document_models() -> List[Type[Document]]:
    """Document models registered with Beanie on startup."""
    return [AccountDocument]


__all__ = [
    "Account",
    "AccountDocument",
    "Amount",
    "SIGNUP_ATTEMPTS",
    "SIGNUP_BALANCE",
    "get_document_models",
]
