"""Account Pydantic schemas."""

from typing import Optional

from flipball.models import Amount
from flipball.schemas.common import BaseSchema


class SignupRequest(BaseSchema):
    """Signup body."""

    firstname: Optional[str] = None
    lastname: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseSchema):
    """Login body."""

    email: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseSchema):
    """Successful login; the client keeps the email for later requests."""

    success: bool = True
    message: str
    email: str


class BalanceResponse(BaseSchema):
    """Current ledger view."""

    success: bool = True
    balance: Amount
    attempts: int


class UpdateBalanceRequest(BaseSchema):
    """Unrestricted ledger overwrite. Omitted fields are left as they are."""

    email: Optional[str] = None
    balance: Optional[Amount] = None
    attempts: Optional[int] = None


class AddFundsRequest(BaseSchema):
    """Top-up body."""

    email: Optional[str] = None
    amount: Optional[Amount] = None


class ProfileResponse(BaseSchema):
    """Account profile."""

    success: bool = True
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    email: str
    balance: Amount
    attempts: int
