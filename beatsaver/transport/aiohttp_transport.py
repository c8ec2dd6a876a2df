"""Asyncio transport backed by ``aiohttp``."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import aiohttp

from .._core._request import RequestConfig
from ..exceptions import TransportError
from .base import AsyncTransport, Response

logger = logging.getLogger(__name__)


class AiohttpTransport(AsyncTransport):
    """Perform GETs through an ``aiohttp.ClientSession``.

    The session is created lazily on first use so that it binds to the
    running event loop.

    Parameters:
        session: Session to use instead of an owned one.
        config: Timeout and headers sent with every request.
    """

    def __init__(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        config: Optional[RequestConfig] = None,
    ) -> None:
        super().__init__(config)
        self._owns_session = session is None
        self._session = session

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    async def fetch(self, url: str) -> Response:
        session = self._get_session()
        timeout = aiohttp.ClientTimeout(total=self.config.timeout)
        try:
            async with session.get(
                url, headers=self.config.merged_headers(), timeout=timeout
            ) as resp:
                body = await resp.read()
                status = resp.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(f"GET {url} failed: {exc!r}", url=url, cause=exc) from exc

        logger.debug("GET %s -> %s (%d bytes)", url, status, len(body))
        return Response(status=status, body=body)

    async def aclose(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None
