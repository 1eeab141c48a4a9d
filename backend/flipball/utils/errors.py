"""
Error taxonomy and formatting utilities.

Every failure a client can see is a ``FlipballError`` subclass carrying the
message that goes back in the ``{"success": false, "message": ...}`` body.

Functions:
- format_api_error(exception): Convert to API error response
- format_log_error(exception): Convert to structured log entry
"""

from typing import Any, Dict, Optional


class FlipballError(Exception):
    """Base class for errors reported to API clients."""

    message = "Request failed"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class DuplicateUser(FlipballError):
    message = "User already exists!"


class InvalidCredentials(FlipballError):
    message = "Invalid credentials!"


class AccountNotFound(FlipballError):
    message = "User not found!"


class NoAttemptsLeft(FlipballError):
    message = "❌ No attempts left! Add more funds to play again."


class InsufficientBalance(FlipballError):
    message = "Insufficient balance!"


class BelowMinimum(FlipballError):
    message = "Minimum ₹1000 required!"


class StorageFailure(FlipballError):
    """The account store could not complete an operation."""

    message = "Storage error"


def format_api_error(exception: Exception, message: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the failure body for an API response.

    ``message`` overrides the exception's own text, which is how endpoints
    report their generic failure (e.g. "Signup failed!") for storage errors.
    """
    if message is None:
        message = exception.message if isinstance(exception, FlipballError) else str(exception)
    return {"success": False, "message": message}


def format_log_error(exception: Exception, **context: Any) -> Dict[str, Any]:
    """Structured log entry for an exception."""
    entry: Dict[str, Any] = {
        "error_type": type(exception).__name__,
        "error": str(exception),
    }
    cause = exception.__cause__
    if cause is not None:
        entry["cause_type"] = type(cause).__name__
        entry["cause"] = str(cause)
    entry.update(context)
    return entry
