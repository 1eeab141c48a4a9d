"""
Account models.

``Account`` is the domain representation used by services and routes.
``AccountDocument`` is its MongoDB schema in the ``users`` collection.

Schema Fields:
- _id: ObjectId (MongoDB auto-generated)
- firstname, lastname, password: opaque strings
- email: unique account identifier
- balance: currency amount (starts at 100)
- attempts: plays left (starts at 0)
- totalAttemptsPlayed: completed plays, drives the blue box sequence
- created_at, updated_at: Timestamps

Indexes:
- email (unique)
"""

from datetime import datetime
from typing import Optional, Union

import pymongo
from pydantic import BaseModel, ConfigDict, Field, FiniteFloat
from pymongo import IndexModel

from flipball.database.base import BaseDocument

# NaN and Infinity are rejected so a ledger always holds real numbers.
Amount = Union[int, FiniteFloat]

SIGNUP_BALANCE = 100
SIGNUP_ATTEMPTS = 0


class Account(BaseModel):
    """A player account with identity fields and its ledger."""

    model_config = ConfigDict(from_attributes=True)

    email: str
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    password: Optional[str] = None
    balance: Amount = SIGNUP_BALANCE
    attempts: int = SIGNUP_ATTEMPTS
    total_attempts_played: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AccountDocument(BaseDocument):
    """MongoDB document for an account."""

    model_config = ConfigDict(populate_by_name=True)

    firstname: Optional[str] = None
    lastname: Optional[str] = None
    email: str
    password: Optional[str] = None
    balance: Amount = SIGNUP_BALANCE
    attempts: int = SIGNUP_ATTEMPTS
    total_attempts_played: int = Field(default=0, alias="totalAttemptsPlayed")

    class Settings:
        name = "users"
        use_state_management = True
        indexes = [
            IndexModel([("email", pymongo.ASCENDING)], unique=True),
        ]

    def to_domain(self) -> Account:
        return Account.model_validate(self)
