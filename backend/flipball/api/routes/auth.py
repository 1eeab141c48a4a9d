"""Signup, login and logout routes."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from flipball.api.dependencies import get_account_repository, get_account_service
from flipball.database.repositories import AccountRepository
from flipball.schemas import LoginRequest, LoginResponse, SignupRequest, StatusResponse
from flipball.services import AccountService
from flipball.utils.errors import (
    DuplicateUser,
    InvalidCredentials,
    StorageFailure,
    format_api_error,
    format_log_error,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.post("/signup", response_model=StatusResponse)
async def signup(
    payload: SignupRequest,
    repo: AccountRepository = Depends(get_account_repository),
    account_service: AccountService = Depends(get_account_service),
):
    """Create an account with the starting balance."""
    if not payload.email:
        return JSONResponse(content={"success": False, "message": "Signup failed!"})

    try:
        await account_service.create_account(
            repo,
            email=payload.email,
            firstname=payload.firstname,
            lastname=payload.lastname,
            password=payload.password,
        )
    except DuplicateUser as e:
        return JSONResponse(content=format_api_error(e))
    except StorageFailure as e:
        logger.error("Signup failed", extra=format_log_error(e, email=payload.email))
        return JSONResponse(content=format_api_error(e, "Signup failed!"))

    return StatusResponse(success=True, message="Signup successful!")


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    repo: AccountRepository = Depends(get_account_repository),
    account_service: AccountService = Depends(get_account_service),
):
    """Check credentials and return the email the client keeps for later calls."""
    try:
        account = await account_service.verify(repo, payload.email, payload.password)
    except InvalidCredentials as e:
        return JSONResponse(content=format_api_error(e))
    except StorageFailure as e:
        logger.error("Login failed", extra=format_log_error(e, email=payload.email))
        return JSONResponse(content=format_api_error(e, "Login failed!"))

    return LoginResponse(message="Login successful!", email=account.email)


@router.get("/logout", response_model=StatusResponse)
async def logout():
    """Stateless: there is no session to invalidate."""
    return StatusResponse(success=True, message="Logged out!")
