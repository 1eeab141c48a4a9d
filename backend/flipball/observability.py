"""Logfire cloud observability initialization and instrumentation."""

import logging
from typing import Optional

import logfire
from fastapi import FastAPI

from flipball import __version__
from flipball.config import Settings

logger = logging.getLogger(__name__)


def initialize_logfire(settings: Settings, app: Optional[FastAPI] = None) -> None:
    """
    Initialize Logfire and bridge Python logging into it.

    Instruments:
    - FastAPI request handling (when `app` is given)
    - PyMongo commands issued by Motor/Beanie
    - Python logging (bridges to Logfire)

    Without a token this only logs a warning; the service runs with plain
    logging.
    """
    if not settings.logfire_token:
        logger.warning("Logfire token not set - observability disabled")
        return

    try:
        logfire.configure(
            token=settings.logfire_token,
            service_name="flipball",
            service_version=__version__,
            environment=settings.environment,
        )

        if app is not None:
            logfire.instrument_fastapi(app)

        try:
            logfire.instrument_pymongo()
        except Exception as instrument_error:
            logger.debug(f"PyMongo instrumentation skipped: {instrument_error}")

        root_logger = logging.getLogger()
        root_logger.addHandler(logfire.LogfireLoggingHandler())

        logger.info("Logfire cloud tracking initialized")

    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")
