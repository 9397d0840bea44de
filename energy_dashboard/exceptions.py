"""Exceptions for the energy dashboard library."""

from __future__ import annotations


class DashboardError(Exception):
    """Base exception for all library errors."""


class DashboardValidationError(DashboardError, ValueError):
    """Input rejected before anything was sent over the wire."""


class DashboardHttpStatusError(DashboardError):
    """Home Assistant answered with a non-success status."""

    def __init__(self, status: int, reason: str | None = None) -> None:
        """Initialize with the HTTP status code and reason phrase."""
        self.status = status
        self.reason = reason or ""
        super().__init__(f"HTTP {status}: {self.reason}")


class DashboardAuthenticationError(DashboardHttpStatusError):
    """The access token was missing or rejected."""


class DashboardTimeoutError(DashboardError, TimeoutError):
    """The request did not complete before the deadline."""


class DashboardConnectionError(DashboardError):
    """Transport level failure, no response was received."""


class DashboardDataError(DashboardError):
    """The response body could not be decoded."""


class DashboardConfigDecodeError(DashboardError):
    """The persisted configuration record is corrupt."""
