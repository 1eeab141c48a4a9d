"""
Database module initialization.
Exports database components for use throughout the application.
"""

from flipball.database.connection import (
    init_db,
    close_db,
    get_client,
    get_database,
    check_db_connection,
    get_db_info,
    sanitize_mongodb_url,
)
from flipball.database.base import BaseDocument, TimestampMixin

__all__ = [
    # Connection management
    "init_db",
    "close_db",
    "get_client",
    "get_database",
    # Base classes
    "BaseDocument",
    "TimestampMixin",
    # Utilities
    "check_db_connection",
    "get_db_info",
    "sanitize_mongodb_url",
]
