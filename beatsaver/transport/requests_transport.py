"""Blocking transport backed by ``requests``."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from .._core._request import RequestConfig
from ..exceptions import TransportError
from .base import Response, Transport

logger = logging.getLogger(__name__)


class RequestsTransport(Transport):
    """Perform GETs through a ``requests.Session``.

    Parameters:
        session: Session to use. When omitted a new one is created and
            closed together with the transport.
        config: Timeout and headers sent with every request.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        config: Optional[RequestConfig] = None,
    ) -> None:
        super().__init__(config)
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def fetch(self, url: str) -> Response:
        try:
            with self.session.get(
                url,
                headers=self.config.merged_headers(),
                timeout=self.config.timeout,
            ) as resp:
                body = resp.content
                status = resp.status_code
        except requests.RequestException as exc:
            raise TransportError(f"GET {url} failed: {exc}", url=url, cause=exc) from exc

        logger.debug("GET %s -> %s (%d bytes)", url, status, len(body))
        return Response(status=status, body=body)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()
