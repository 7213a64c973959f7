# src/soundcloud_client/core/errors.py
"""
Failure kinds raised by the client.

Every error derives from :class:`SoundCloudError`, so callers can catch the
whole family at once or pick a single kind, e.g. to tell "not downloadable"
apart from a network failure. Errors compare equal when they are of the same
class and carry the same message.
"""

from typing import Optional


class SoundCloudError(Exception):
    """Base class for all client errors."""

    prefix: str = "SoundCloud client error"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        if self.message:
            return f"{self.prefix}: {self.message}"
        return self.prefix

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SoundCloudError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    @property
    def cause(self) -> Optional[BaseException]:
        """The underlying exception, if this error wraps one."""
        return self.__cause__


class ApiError(SoundCloudError):
    """The API answered with an error payload (or without an expected part)."""
    prefix = "SoundCloud error"


class ParseError(SoundCloudError):
    """A URL could not be parsed."""
    prefix = "Parse error"


class JsonError(SoundCloudError):
    """A response body did not decode into the expected record shape."""
    prefix = "JSON error"


class HttpError(SoundCloudError):
    """Transport failure: connection, TLS, timeout."""
    prefix = "HTTP error"


class InvalidFilter(SoundCloudError):
    """A query builder was given a value it cannot encode."""
    prefix = "Invalid filter"


class IoError(SoundCloudError):
    """The sink rejected a write while a body was being transferred."""
    prefix = "IO error"


class UriError(SoundCloudError):
    """A URL parsed fine but cannot be used as a request target."""
    prefix = "URI error"


class TrackNotDownloadable(SoundCloudError):
    prefix = "The track is not available for download"


class TrackNotStreamable(SoundCloudError):
    prefix = "The track is not available for streaming"
