"""API request and response schemas."""

from flipball.schemas.account import (
    AddFundsRequest,
    BalanceResponse,
    LoginRequest,
    LoginResponse,
    ProfileResponse,
    SignupRequest,
    UpdateBalanceRequest,
)
from flipball.schemas.common import BaseSchema, StatusResponse
from flipball.schemas.game import PlayRequest, PlayResponse

__all__ = [
    "AddFundsRequest",
    "BalanceResponse",
    "BaseSchema",
    "LoginRequest",
    "LoginResponse",
    "PlayRequest",
    "PlayResponse",
    "ProfileResponse",
    "SignupRequest",
    "StatusResponse",
    "UpdateBalanceRequest",
]
