"""
Main FastAPI application entry point for Flipball.

This is the core application file that:
- Initializes FastAPI with lifespan management
- Builds the account store and services and injects them via app.state
- Configures CORS for the frontend
- Serves the static frontend when present
- Maps unmatched routes and malformed bodies to JSON failures
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.staticfiles import StaticFiles

from flipball import __version__
from flipball.api.routes import accounts_router, auth_router, game_router
from flipball.config import Settings, get_settings
from flipball.database import check_db_connection, close_db, get_db_info, init_db
from flipball.database.repositories import InMemoryAccountRepository, MongoAccountRepository
from flipball.observability import initialize_logfire
from flipball.services import AccountLocks, AccountService, SystemRandomSource, WagerService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application for the given settings."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.
        Handles startup and shutdown events.
        """
        logger.info(
            f"Starting Flipball API Server "
            f"(environment={settings.environment}, storage={settings.storage_backend})"
        )

        if settings.storage_backend == "mongodb":
            await init_db()
            db_info = get_db_info()
            if await check_db_connection():
                logger.info(f"MongoDB connected: {db_info['url']} ({db_info['database']})")
            else:
                logger.error(f"MongoDB connection failed: {db_info['url']} ({db_info['database']})")
            app.state.account_repository = MongoAccountRepository()
        else:
            logger.warning("Using in-memory account store; data is lost on shutdown")
            app.state.account_repository = InMemoryAccountRepository()

        locks = AccountLocks()
        app.state.account_service = AccountService(locks=locks)
        app.state.wager_service = WagerService(
            locks=locks,
            random_source=SystemRandomSource(seed=settings.game_random_seed),
        )

        logger.info("Flipball API Server startup complete")

        yield

        logger.info("Shutting down Flipball API Server")
        if settings.storage_backend == "mongodb":
            await close_db()

    app = FastAPI(
        title="Flipball API",
        description="Accounts, balances and the blue box game",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.settings = settings

    initialize_logfire(settings, app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Unknown paths and unknown methods on known paths are both "not found".
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"success": False, "message": "Route not found"},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": "Invalid request"},
        )

    @app.get("/health", tags=["Health"])
    async def health_check() -> Dict[str, str]:
        """
        Health check endpoint for load balancers and monitoring.
        """
        if settings.storage_backend == "mongodb":
            db_connected = await check_db_connection()
        else:
            db_connected = True

        return {
            "status": "healthy" if db_connected else "degraded",
            "service": "flipball-api",
            "version": __version__,
            "database": "connected" if db_connected else "disconnected",
            "environment": settings.environment,
        }

    app.include_router(auth_router)
    app.include_router(accounts_router)
    app.include_router(game_router)

    # Mounted last so API routes take precedence.
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.info(f"Static directory {static_dir} not found; frontend not served")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "flipball.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
