"""Blue box game routes."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from flipball.api.dependencies import get_account_repository, get_wager_service
from flipball.database.repositories import AccountRepository
from flipball.schemas import PlayRequest, PlayResponse
from flipball.services import WagerService
from flipball.utils.errors import (
    AccountNotFound,
    InsufficientBalance,
    NoAttemptsLeft,
    StorageFailure,
    format_api_error,
    format_log_error,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Game"])


@router.post("/play", response_model=PlayResponse)
async def play(
    payload: PlayRequest,
    repo: AccountRepository = Depends(get_account_repository),
    wager_service: WagerService = Depends(get_wager_service),
):
    """Bet on one of three boxes; a hit on the blue box pays five times the bet."""
    if not payload.email:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": "Missing email!"},
        )

    try:
        bet = payload.bet if payload.bet is not None else 0
        outcome = await wager_service.play(repo, payload.email, bet, payload.choice)
    except AccountNotFound:
        return JSONResponse(content={"success": False})
    except (NoAttemptsLeft, InsufficientBalance) as e:
        return JSONResponse(content=format_api_error(e))
    except StorageFailure as e:
        logger.error("Play error", extra=format_log_error(e, email=payload.email))
        return JSONResponse(content=format_api_error(e, "Error playing game"))

    return PlayResponse(
        attempt_number=outcome.attempt_number,
        blue_box=outcome.blue_box,
        win=outcome.win,
        win_amount=outcome.win_amount,
        lost=outcome.lost,
        new_balance=outcome.new_balance,
        remaining_attempts=outcome.remaining_attempts,
    )
