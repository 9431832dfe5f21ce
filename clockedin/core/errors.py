"""
Error taxonomy for the meeting stats backend.

Every error carries the HTTP status it maps to so the FastAPI exception
handlers in ``clockedin.main`` can render it as ``{"error": message}``.
"""

from typing import Any


class ClockedInError(Exception):
    """Base exception for all application errors."""

    status_code = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NotAuthenticated(ClockedInError):
    """No live credential is stored for the principal."""

    status_code = 401

    def __init__(self, message: str = "Not authenticated", principal_id: str | None = None) -> None:
        super().__init__(message, {"principal_id": principal_id} if principal_id else None)
        self.principal_id = principal_id


class TokenInvalid(ClockedInError):
    """The bearer JWT is missing, malformed or expired."""

    status_code = 401

    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(message)


class UpstreamFetchFailed(ClockedInError):
    """The calendar provider call failed or answered with an error status."""

    status_code = 502

    def __init__(
        self,
        message: str = "Failed to fetch meetings",
        upstream_status: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.upstream_status = upstream_status


class InvalidInput(ClockedInError):
    status_code = 400


class OAuthExchangeFailed(ClockedInError):
    """The authorization code could not be exchanged for credentials."""

    status_code = 401
