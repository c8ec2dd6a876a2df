"""beatsaver: A Python client for the BeatSaver map-hosting API.

Quick Start:
    ```python
    from beatsaver import BeatSaver

    with BeatSaver() as client:
        # Look up a single map by key or hash
        beatmap = client.map("2144")

        # Walk a paginated listing as one continuous sequence
        for hot in client.maps_hot():
            print(hot.name)

        # Download the map archive
        archive = client.download(beatmap)
    ```

    The same operations are available on ``AsyncBeatSaver``:

    ```python
    async with AsyncBeatSaver() as client:
        beatmap = await client.map("2144")
        async for hit in client.search("shut up and dance"):
            print(hit.name)
    ```

Key Features:
    - **Sync and async**: ``BeatSaver`` and ``AsyncBeatSaver`` share one API
    - **Pluggable transports**: requests, httpx (sync and async) and aiohttp
    - **Typed models**: ``Map``, ``User``, ``Page`` and friends
    - **Rate limits**: HTTP 429 surfaces as ``RateLimitError`` with reset info
"""

import logging
from importlib.metadata import version

from .client import AsyncBeatSaver, BeatSaver, SortOrder
from .exceptions import (
    ArgumentError,
    BeatSaverError,
    DecodeError,
    EncodingError,
    MapIdError,
    RateLimitError,
    TransportError,
)
from .ids import MapHash, MapId, MapKey, UserId
from .models import (
    DifficultyDetail,
    Map,
    MapCharacteristic,
    MapDifficulties,
    MapDifficultyCharacteristics,
    MapMetadata,
    MapStats,
    Page,
    User,
    UserDetail,
    UserDiffStats,
    UserStats,
)
from .pagination import AsyncPageIterator, PageIterator
from .rate_limit import RateLimitInfo, classify, parse_rate_limit
from .system import PROD, System
from .transport import (
    AiohttpTransport,
    AsyncHttpxTransport,
    AsyncTransport,
    HttpxTransport,
    RequestsTransport,
    Response,
    Transport,
)

logger = logging.getLogger(__name__)

__all__ = [
    # client.py
    "BeatSaver",
    "AsyncBeatSaver",
    "SortOrder",
    # ids.py
    "MapId",
    "MapKey",
    "MapHash",
    "UserId",
    # models
    "Page",
    "Map",
    "MapMetadata",
    "MapStats",
    "MapDifficulties",
    "MapCharacteristic",
    "MapDifficultyCharacteristics",
    "DifficultyDetail",
    "User",
    "UserDetail",
    "UserStats",
    "UserDiffStats",
    # pagination.py
    "PageIterator",
    "AsyncPageIterator",
    # rate_limit.py
    "RateLimitInfo",
    "classify",
    "parse_rate_limit",
    # exceptions.py
    "BeatSaverError",
    "TransportError",
    "DecodeError",
    "EncodingError",
    "ArgumentError",
    "MapIdError",
    "RateLimitError",
    # transport
    "Transport",
    "AsyncTransport",
    "Response",
    "RequestsTransport",
    "HttpxTransport",
    "AsyncHttpxTransport",
    "AiohttpTransport",
    # system.py
    "System",
    "PROD",
]

__version__ = version("beatsaver")
