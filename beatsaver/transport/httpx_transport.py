"""Blocking and asyncio transports backed by ``httpx``."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from .._core._request import RequestConfig
from ..exceptions import TransportError
from .base import AsyncTransport, Response, Transport

logger = logging.getLogger(__name__)


class HttpxTransport(Transport):
    """Perform GETs through an ``httpx.Client``.

    Parameters:
        client: Client to use. When omitted a new one is created (following
            redirects, as download links redirect to the CDN) and closed
            together with the transport.
        config: Timeout and headers sent with every request.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        config: Optional[RequestConfig] = None,
    ) -> None:
        super().__init__(config)
        self._owns_client = client is None
        self.client = client if client is not None else httpx.Client(follow_redirects=True)

    def fetch(self, url: str) -> Response:
        try:
            resp = self.client.get(
                url, headers=self.config.merged_headers(), timeout=self.config.timeout
            )
        except httpx.HTTPError as exc:
            raise TransportError(f"GET {url} failed: {exc}", url=url, cause=exc) from exc

        logger.debug("GET %s -> %s (%d bytes)", url, resp.status_code, len(resp.content))
        return Response(status=resp.status_code, body=resp.content)

    def close(self) -> None:
        if self._owns_client:
            self.client.close()


class AsyncHttpxTransport(AsyncTransport):
    """Perform GETs through an ``httpx.AsyncClient``.

    Parameters:
        client: Client to use. When omitted a new one is created and closed
            by ``aclose``.
        config: Timeout and headers sent with every request.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        config: Optional[RequestConfig] = None,
    ) -> None:
        super().__init__(config)
        self._owns_client = client is None
        self.client = (
            client if client is not None else httpx.AsyncClient(follow_redirects=True)
        )

    async def fetch(self, url: str) -> Response:
        try:
            resp = await self.client.get(
                url, headers=self.config.merged_headers(), timeout=self.config.timeout
            )
        except httpx.HTTPError as exc:
            raise TransportError(f"GET {url} failed: {exc}", url=url, cause=exc) from exc

        logger.debug("GET %s -> %s (%d bytes)", url, resp.status_code, len(resp.content))
        return Response(status=resp.status_code, body=resp.content)

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()
