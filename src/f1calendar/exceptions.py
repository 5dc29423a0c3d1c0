"""Exceptions raised while serving F1 season data.

Each exception knows the HTTP status it maps to and how to render itself as
an ``{"error": ..., **context}`` response body.
"""

from __future__ import annotations

from typing import Any

INTERNAL_ERROR = "Erro interno do servidor"


class F1CalendarError(Exception):
    """Base exception for all request failures."""

    status_code = 500

    def __init__(self, error: str, **context: Any) -> None:
        self.message = error
        self.context = context
        super().__init__(error)

    def to_body(self) -> dict[str, Any]:
        return {"error": self.message, **self.context}


class InvalidYearError(F1CalendarError):
    """Raised when the season token is malformed or out of range."""

    status_code = 400


class UpstreamUnavailableError(F1CalendarError):
    """Raised when the primary source answers with a non-2xx status.

    The upstream's status code is mirrored back to the caller.
    """

    def __init__(self, error: str, status_code: int) -> None:
        super().__init__(error, status=status_code)
        self.status_code = status_code


class UpstreamTransportError(F1CalendarError):
    """Raised when the primary source is unreachable or returns invalid JSON."""

    def __init__(self, message: str) -> None:
        super().__init__(INTERNAL_ERROR, message=message)


class UpstreamPayloadError(UpstreamTransportError):
    """Raised when an upstream record lacks fields the output schema requires."""


class NoDataFoundError(F1CalendarError):
    """Raised when the primary source has no data for the requested season."""

    status_code = 404
