"""HTTP backends the client can run on.

``RequestsTransport`` and ``HttpxTransport`` block the calling thread;
``AsyncHttpxTransport`` and ``AiohttpTransport`` run on asyncio. All of them
return a ``Response(status, body)`` and raise ``TransportError`` on failure.
"""

from .aiohttp_transport import AiohttpTransport
from .base import AsyncTransport, Response, Transport
from .httpx_transport import AsyncHttpxTransport, HttpxTransport
from .requests_transport import RequestsTransport

__all__ = [
    "Response",
    "Transport",
    "AsyncTransport",
    "RequestsTransport",
    "HttpxTransport",
    "AsyncHttpxTransport",
    "AiohttpTransport",
]
