"""BeatSaver API clients.

``BeatSaver`` blocks the calling thread, ``AsyncBeatSaver`` runs on asyncio.
Both expose the same operations under the same names; on the asyncio client
single-record and single-page operations are awaited and listings are
consumed with ``async for``.

Every listing comes in three shapes:

* ``<listing>_page(..., page)``: one ``Page`` of results,
* ``<listing>_page_iter(..., page)``: every result starting at ``page``,
* ``<listing>(...)``: every result starting at the first page.

Examples:
    >>> from beatsaver import BeatSaver
    >>> with BeatSaver() as client:  # doctest: +SKIP
    ...     beatmap = client.map("2144")
    ...     for other in client.maps_by(beatmap.uploader):
    ...         print(other.name)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Union

from ._core import _routes
from ._core._routes import Route, SortOrder
from ._core._validators import require_page
from .ids import MapId, UserId
from .models import Map, User
from .pagination import AsyncPageIterator, PageIterator
from .rate_limit import classify
from .system import PROD, System
from .transport import AsyncHttpxTransport, AsyncTransport, RequestsTransport, Transport
from .transport.base import Response

MapIdLike = Union[MapId, Map, str]
UserLike = Union[UserId, User, str]

__all__ = ["BeatSaver", "AsyncBeatSaver", "SortOrder"]


class _BeatSaverBase(ABC):
    """Operations shared by the blocking and the asyncio client.

    Each operation builds a ``Route`` and hands it to ``_execute``; listings
    wrap their ``*_page`` operation with ``_paginate``. Subclasses decide
    whether those run to completion or return awaitables and async iterators.
    """

    def __init__(self, system: System = PROD) -> None:
        self.system = system

    @abstractmethod
    def _execute(self, route: Route[Any]) -> Any:
        """Perform the GET for *route* and decode the response."""

    @abstractmethod
    def _paginate(self, fetch: Callable[[int], Any], page: int) -> Any:
        """Wrap a page fetching operation into an iterator starting at *page*."""

    def _decode(self, route: Route[Any], response: Response) -> Any:
        return route.decode(classify(response.status, response.body))

    def map(self, map_id: MapIdLike):
        """Get a map by key, by hash, or from a previously decoded ``Map``.

        String ids are parsed with ``MapId.parse``: 40 characters are a hash,
        anything else a hexadecimal key.
        """
        return self._execute(_routes.map_detail(MapId.of(map_id)))

    def download(self, map_id: MapIdLike):
        """Download the zipped archive of a map as ``bytes``."""
        return self._execute(_routes.download(MapId.of(map_id)))

    def user(self, user_id: UserLike):
        """Look up a user by their 24 character account id.

        Raises:
            ArgumentError: if the id is malformed; no request is made.
        """
        return self._execute(_routes.user(UserId.of(user_id)))

    def maps_by_page(self, user: UserLike, page: int):
        """Maps uploaded by *user*, one page."""
        return self._execute(_routes.maps_by_uploader(UserId.of(user), page))

    def maps_by_page_iter(self, user: UserLike, page: int):
        """Maps uploaded by *user*, starting at *page*."""
        user_id = UserId.of(user)
        return self._paginate(lambda index: self.maps_by_page(user_id, index), page)

    def maps_by(self, user: UserLike):
        """Every map uploaded by *user*."""
        return self.maps_by_page_iter(user, 0)

    def maps_sorted_page(self, order: Union[SortOrder, str], page: int):
        """Maps listed in the given ``SortOrder``, one page."""
        return self._execute(_routes.maps_sorted(order, page))

    def maps_sorted_page_iter(self, order: Union[SortOrder, str], page: int):
        order = _routes.sort_order(order)
        return self._paginate(lambda index: self.maps_sorted_page(order, index), page)

    def maps_sorted(self, order: Union[SortOrder, str]):
        return self.maps_sorted_page_iter(order, 0)

    def maps_hot_page(self, page: int):
        """Currently trending maps, one page."""
        return self.maps_sorted_page(SortOrder.HOT, page)

    def maps_hot_page_iter(self, page: int):
        return self.maps_sorted_page_iter(SortOrder.HOT, page)

    def maps_hot(self):
        return self.maps_sorted(SortOrder.HOT)

    def maps_rating_page(self, page: int):
        """Maps sorted by rating, one page."""
        return self.maps_sorted_page(SortOrder.RATING, page)

    def maps_rating_page_iter(self, page: int):
        return self.maps_sorted_page_iter(SortOrder.RATING, page)

    def maps_rating(self):
        return self.maps_sorted(SortOrder.RATING)

    def maps_latest_page(self, page: int):
        """Maps sorted by upload time, newest first, one page."""
        return self.maps_sorted_page(SortOrder.LATEST, page)

    def maps_latest_page_iter(self, page: int):
        return self.maps_sorted_page_iter(SortOrder.LATEST, page)

    def maps_latest(self):
        return self.maps_sorted(SortOrder.LATEST)

    def maps_downloads_page(self, page: int):
        """Maps sorted by download count, one page."""
        return self.maps_sorted_page(SortOrder.DOWNLOADS, page)

    def maps_downloads_page_iter(self, page: int):
        return self.maps_sorted_page_iter(SortOrder.DOWNLOADS, page)

    def maps_downloads(self):
        return self.maps_sorted(SortOrder.DOWNLOADS)

    def maps_plays_page(self, page: int):
        """Maps sorted by play count, one page."""
        return self.maps_sorted_page(SortOrder.PLAYS, page)

    def maps_plays_page_iter(self, page: int):
        return self.maps_sorted_page_iter(SortOrder.PLAYS, page)

    def maps_plays(self):
        return self.maps_sorted(SortOrder.PLAYS)

    def search_page(self, query: str, page: int):
        """Full text search, one page. The query is percent-encoded."""
        return self._execute(_routes.search_text(query, page))

    def search_page_iter(self, query: str, page: int):
        return self._paginate(lambda index: self.search_page(query, index), page)

    def search(self, query: str):
        return self.search_page_iter(query, 0)

    def search_advanced_page(self, query: str, page: int):
        """Search with a Lucene query (e.g. ``metadata.bpm:[120 TO 130]``), one page."""
        return self._execute(_routes.search_advanced(query, page))

    def search_advanced_page_iter(self, query: str, page: int):
        return self._paginate(lambda index: self.search_advanced_page(query, index), page)

    def search_advanced(self, query: str):
        return self.search_advanced_page_iter(query, 0)


class BeatSaver(_BeatSaverBase):
    """Blocking BeatSaver client.

    Parameters:
        transport: HTTP backend; defaults to a ``RequestsTransport`` owned
            (and closed) by this client.
        system: Deployment to talk to, defaults to ``PROD``.
    """

    def __init__(self, transport: Optional[Transport] = None, system: System = PROD) -> None:
        super().__init__(system)
        self._owns_transport = transport is None
        self.transport = transport if transport is not None else RequestsTransport()

    def _execute(self, route: Route[Any]) -> Any:
        response = self.transport.fetch(self.system.url(route.path))
        return self._decode(route, response)

    def _paginate(self, fetch: Callable[[int], Any], page: int) -> PageIterator[Any]:
        return PageIterator(fetch, require_page(page))

    def close(self) -> None:
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> "BeatSaver":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"BeatSaver(transport={type(self.transport).__name__}, system={self.system.name})"


class AsyncBeatSaver(_BeatSaverBase):
    """Asyncio BeatSaver client.

    Parameters:
        transport: HTTP backend; defaults to an ``AsyncHttpxTransport`` owned
            (and closed) by this client.
        system: Deployment to talk to, defaults to ``PROD``.

    Examples:
        >>> async with AsyncBeatSaver() as client:  # doctest: +SKIP
        ...     beatmap = await client.map("2144")
        ...     async for hot in client.maps_hot():
        ...         print(hot.name)
    """

    def __init__(
        self, transport: Optional[AsyncTransport] = None, system: System = PROD
    ) -> None:
        super().__init__(system)
        self._owns_transport = transport is None
        self.transport = transport if transport is not None else AsyncHttpxTransport()

    async def _execute(self, route: Route[Any]) -> Any:
        response = await self.transport.fetch(self.system.url(route.path))
        return self._decode(route, response)

    def _paginate(self, fetch: Callable[[int], Any], page: int) -> AsyncPageIterator[Any]:
        return AsyncPageIterator(fetch, require_page(page))

    async def aclose(self) -> None:
        if self._owns_transport:
            await self.transport.aclose()

    async def __aenter__(self) -> "AsyncBeatSaver":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return (
            f"AsyncBeatSaver(transport={type(self.transport).__name__}, "
            f"system={self.system.name})"
        )
