"""API routes module."""

from flipball.api.routes.accounts import router as accounts_router
from flipball.api.routes.auth import router as auth_router
from flipball.api.routes.game import router as game_router

__all__ = [
    "accounts_router",
    "auth_router",
    "game_router",
]
