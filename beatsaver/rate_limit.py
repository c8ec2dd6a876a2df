"""Detection and decoding of BeatSaver rate limit responses.

When a client is throttled the API answers ``429 Too Many Requests`` with a
small JSON body::

    {"reset": 1700000000000, "resetAfter": 5000}

``reset`` is the unix time (milliseconds) at which the limit expires and
``resetAfter`` the remaining duration in milliseconds. Every transport hands
its ``(status, body)`` pair to :func:`classify`, so throttling is reported the
same way whichever HTTP backend is in use.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from ._core import _decode
from .exceptions import DecodeError, RateLimitError

TOO_MANY_REQUESTS = 429


@dataclass(frozen=True, order=True)
class RateLimitInfo:
    """Decoded body of a 429 response.

    Instances compare, order and hash by ``reset`` only.
    """

    reset: datetime
    reset_after: timedelta = field(compare=False)

    @classmethod
    def from_json(cls, payload: Any) -> "RateLimitInfo":
        reset_after = _decode.integer(payload, "resetAfter", "reset_after")
        if reset_after < 0:
            raise DecodeError("field 'resetAfter' must not be negative")
        return cls(
            reset=_decode.from_millis(_decode.integer(payload, "reset"), "reset"),
            reset_after=_decode.millis_delta(reset_after, "resetAfter"),
        )

    def __str__(self) -> str:
        return f"Rate limited, expiring {self.reset}"


def is_rate_limited(status: int) -> bool:
    return status == TOO_MANY_REQUESTS


def parse_rate_limit(body: bytes) -> RateLimitInfo:
    """Decode the body of a 429 response.

    Raises:
        EncodingError: if the body is not UTF-8.
        DecodeError: if the body is not the expected JSON document.
    """
    return RateLimitInfo.from_json(_decode.decode_json(body))


def classify(status: int, body: bytes) -> bytes:
    """Return *body* unchanged unless *status* signals throttling.

    Raises:
        RateLimitError: for a 429 response with a well formed body.
        EncodingError: for a 429 response whose body is not UTF-8.
        DecodeError: for a 429 response whose body is not the expected JSON.
    """
    if not is_rate_limited(status):
        return body
    info = parse_rate_limit(body)
    raise RateLimitError(info)
