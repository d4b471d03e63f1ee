"""Error taxonomy for a forecast load.

Every error is local to one load request. The controller turns them into a
status line; none of them should terminate the process.
"""

from __future__ import annotations


class ForecastError(Exception):
    """Base class for errors that abort a forecast load."""


class FetchError(ForecastError):
    """An HTTP request failed (non-success status or network error)."""

    def __init__(self, url: str, status: int | None = None, reason: str | None = None) -> None:
        self.url = url
        self.status = status
        if status is not None:
            message = f"HTTP {status} for {url}"
        else:
            message = f"Network error for {url}: {reason or 'unknown error'}"
        super().__init__(message)


class PayloadError(FetchError):
    """A response arrived but its body was not the expected JSON document."""

    def __init__(self, url: str | None, detail: str) -> None:
        source = url or "upstream service"
        ForecastError.__init__(self, f"Unexpected response from {source}: {detail}")
        self.url = source
        self.status = None


class GeocodeError(ForecastError):
    """A search query could not be resolved to coordinates."""


class NoForecastDataError(ForecastError):
    """The grid produced no samples on any channel."""

    def __init__(self, message: str = "No forecast data available for this location.") -> None:
        super().__init__(message)
