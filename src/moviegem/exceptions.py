"""Error types raised by the booking data pipeline."""

import httpx


class MovieGemError(Exception):
    """Base class for all MovieGem errors."""


class BadServerResponseError(MovieGemError):
    """The data store answered with an unexpected HTTP status."""

    def __init__(self, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(f"Bad server response (status {status_code})")


class RecordDecodeError(MovieGemError):
    """A response body could not be decoded into records."""


class OperationNotSupportedError(MovieGemError):
    """The backing store cannot perform the requested operation."""


class RecordNotFoundError(MovieGemError):
    """No record matches the given key."""


class DuplicateRecordError(MovieGemError):
    """A record with the same key already exists."""


def describe_error(exc: BaseException) -> str:
    """
    Turn a pipeline failure into a message fit for display.

    Transport, protocol and decode failures all read as a load failure;
    the detail is kept in the message for whoever is looking at the logs.
    """
    if isinstance(exc, httpx.TimeoutException):
        return "Request timed out"
    if isinstance(exc, httpx.TransportError):
        return f"Network error: {exc}"
    if isinstance(exc, httpx.InvalidURL):
        return f"Invalid endpoint URL: {exc}"
    if isinstance(exc, MovieGemError):
        return str(exc)
    return f"Unexpected error: {exc}"
