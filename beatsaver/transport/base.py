"""Transport interfaces: the one capability the client needs from HTTP."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from .._core._request import RequestConfig

__all__ = ["Response", "Transport", "AsyncTransport"]


@dataclass(frozen=True)
class Response:
    """Status and raw body of a completed GET."""

    status: int
    body: bytes


class Transport(ABC):
    """A blocking HTTP backend.

    Implementations perform a single GET and return the status and body
    whatever the status is; backend failures are raised as ``TransportError``.
    """

    def __init__(self, config: Optional[RequestConfig] = None) -> None:
        self.config = config or RequestConfig()

    @abstractmethod
    def fetch(self, url: str) -> Response:
        """GET *url*."""

    def close(self) -> None:
        """Release resources owned by the transport."""

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


class AsyncTransport(ABC):
    """An asyncio HTTP backend; same contract as ``Transport``."""

    def __init__(self, config: Optional[RequestConfig] = None) -> None:
        self.config = config or RequestConfig()

    @abstractmethod
    async def fetch(self, url: str) -> Response:
        """GET *url*."""

    async def aclose(self) -> None:
        """Release resources owned by the transport."""

    async def __aenter__(self) -> "AsyncTransport":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.aclose()
