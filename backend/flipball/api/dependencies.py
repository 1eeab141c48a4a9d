"""
FastAPI dependency injection for the account store and services.

The lifespan handler in ``flipball.main`` builds these once per process and
stores them on ``app.state``; handlers receive them through ``Depends``.
"""

from fastapi import Request

from flipball.database.repositories import AccountRepository
from flipball.services import AccountService, WagerService


def get_account_repository(request: Request) -> AccountRepository:
    """Provide the process-wide account repository."""
    return request.app.state.account_repository


def get_account_service(request: Request) -> AccountService:
    return request.app.state.account_service


def get_wager_service(request: Request) -> WagerService:
    return request.app.state.wager_service
