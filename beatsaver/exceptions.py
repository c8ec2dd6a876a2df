"""Exceptions raised by the beatsaver client.

Every failure surfaced by the library is a ``BeatSaverError``. Backend
specific errors (``requests``, ``httpx``, ``aiohttp``) never escape on their
own: they are wrapped in ``TransportError`` and kept as ``cause``.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .rate_limit import RateLimitInfo

__all__ = [
    "BeatSaverError",
    "TransportError",
    "DecodeError",
    "EncodingError",
    "ArgumentError",
    "MapIdError",
    "RateLimitError",
]


class BeatSaverError(Exception):
    """Base class for all errors raised by the beatsaver client."""


class TransportError(BeatSaverError):
    """Raised when the HTTP backend fails to complete a request."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.url = url
        self.cause = cause


class DecodeError(BeatSaverError):
    """Raised when a response body is not the JSON document we expected."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class EncodingError(DecodeError):
    """Raised when a response body is not valid UTF-8."""


class ArgumentError(BeatSaverError, ValueError):
    """Raised when a caller supplied argument fails local validation.

    No request is made when this is raised.
    """

    def __init__(self, argument: str, message: Optional[str] = None):
        super().__init__(f"Invalid argument: {argument}" + (f" ({message})" if message else ""))
        self.argument = argument


class MapIdError(ArgumentError):
    """Raised when text cannot be parsed into a map key or map hash."""

    INVALID_HASH = "invalid_hash"
    INVALID_KEY = "invalid_key"

    def __init__(self, kind: str, value: str):
        message = (
            "specified hash is invalid"
            if kind == self.INVALID_HASH
            else f"invalid hexadecimal map key {value!r}"
        )
        super().__init__("map_id", message)
        self.kind = kind
        self.value = value


class RateLimitError(BeatSaverError):
    """Raised when the API answers with HTTP 429.

    Attributes:
        info: The decoded rate limit body.
    """

    def __init__(self, info: RateLimitInfo):
        millis = info.reset_after // timedelta(milliseconds=1)
        super().__init__(f"API rate limit hit (retry in {millis} ms)")
        self.info = info

    @property
    def reset(self) -> datetime:
        """Point in time at which the rate limit expires."""
        return self.info.reset

    @property
    def reset_after(self) -> timedelta:
        """How long to wait before the rate limit expires."""
        return self.info.reset_after
