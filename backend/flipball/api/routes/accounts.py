"""Balance, profile and top-up routes."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from flipball.api.dependencies import get_account_repository, get_account_service
from flipball.database.repositories import AccountRepository
from flipball.schemas import (
    AddFundsRequest,
    BalanceResponse,
    ProfileResponse,
    StatusResponse,
    UpdateBalanceRequest,
)
from flipball.services import AccountService
from flipball.utils.errors import (
    AccountNotFound,
    BelowMinimum,
    StorageFailure,
    format_api_error,
    format_log_error,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Accounts"])

NO_EMAIL = {"success": False, "message": "No email provided!"}


@router.get("/balance", response_model=BalanceResponse)
async def get_balance(
    email: Optional[str] = None,
    repo: AccountRepository = Depends(get_account_repository),
    account_service: AccountService = Depends(get_account_service),
):
    """Get the balance and attempts left for an account."""
    if not email:
        return JSONResponse(content=NO_EMAIL)

    try:
        account = await account_service.get_account(repo, email)
    except AccountNotFound as e:
        return JSONResponse(content=format_api_error(e))
    except StorageFailure as e:
        logger.error("Balance lookup failed", extra=format_log_error(e, email=email))
        return JSONResponse(content=format_api_error(e, "Error fetching balance"))

    return BalanceResponse(balance=account.balance, attempts=account.attempts)


@router.post("/update-balance", response_model=StatusResponse)
async def update_balance(
    payload: UpdateBalanceRequest,
    repo: AccountRepository = Depends(get_account_repository),
    account_service: AccountService = Depends(get_account_service),
):
    """Overwrite balance and attempts. No limits are enforced."""
    fields = payload.model_dump(include={"balance", "attempts"}, exclude_none=True)
    try:
        await account_service.update_ledger(repo, payload.email, fields)
    except AccountNotFound as e:
        return JSONResponse(content=format_api_error(e))
    except StorageFailure as e:
        logger.error("Balance update failed", extra=format_log_error(e, email=payload.email))
        return JSONResponse(content=format_api_error(e, "Error updating balance"))

    return StatusResponse(success=True, message="Balance updated!")


@router.post("/addFunds", response_model=BalanceResponse)
async def add_funds(
    payload: AddFundsRequest,
    repo: AccountRepository = Depends(get_account_repository),
    account_service: AccountService = Depends(get_account_service),
):
    """Top up the balance; every top-up grants 25 attempts."""
    try:
        account = await account_service.add_funds(repo, payload.email, payload.amount)
    except (BelowMinimum, AccountNotFound) as e:
        return JSONResponse(content=format_api_error(e))
    except StorageFailure as e:
        logger.error("Top-up failed", extra=format_log_error(e, email=payload.email))
        return JSONResponse(content=format_api_error(e, "Failed to add funds"))

    return BalanceResponse(balance=account.balance, attempts=account.attempts)


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(
    email: Optional[str] = None,
    repo: AccountRepository = Depends(get_account_repository),
    account_service: AccountService = Depends(get_account_service),
):
    """Get the profile of an account."""
    if not email:
        return JSONResponse(content=NO_EMAIL)

    try:
        account = await account_service.get_account(repo, email)
    except AccountNotFound as e:
        return JSONResponse(content=format_api_error(e))
    except StorageFailure as e:
        logger.error("Profile lookup failed", extra=format_log_error(e, email=email))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=format_api_error(e, "Server error"),
        )

    return ProfileResponse(
        firstname=account.firstname,
        lastname=account.lastname,
        email=account.email,
        balance=account.balance,
        attempts=account.attempts,
    )
