"""Continuous iteration over paginated BeatSaver listings.

A listing endpoint returns one ``Page`` at a time. The iterators in this
module turn a ``fetch(page_index)`` callable into a flat stream of documents,
fetching the next page only once the current one has been drained and the
consumer asks for more.

``PageIterator`` drives a blocking fetch function, ``AsyncPageIterator`` a
coroutine function. Both share ``PageCursor`` and therefore yield documents in
exactly the same order:

    >>> for beatmap in client.maps_hot():  # doctest: +SKIP
    ...     print(beatmap.name)

    >>> async for beatmap in client.maps_hot():  # doctest: +SKIP
    ...     print(beatmap.name)

A failed fetch is raised from ``next()``/``anext()`` at the position where the
missing documents would have been. The iterator is finished after that: later
calls stop without fetching again.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import (
    AsyncIterator,
    Awaitable,
    Callable,
    Deque,
    Generic,
    Iterator,
    Optional,
    TypeVar,
)

from ._core._models import Page

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = ["PageCursor", "PageIterator", "AsyncPageIterator"]


class PageCursor(Generic[T]):
    """Traversal state of one paginated listing.

    The cursor starts out as an empty page whose ``next_page`` is the
    requested start index, so the first pull triggers the first fetch.
    """

    def __init__(self, start_page: int = 0) -> None:
        self._current: Page[T] = Page.empty(next_page=start_page)
        self._items: Deque[T] = deque()
        self._done = False
        self.pages_fetched = 0

    @property
    def page(self) -> Optional[Page[T]]:
        """The most recently fetched page, ``None`` before the first fetch."""
        return self._current if self.pages_fetched else None

    @property
    def done(self) -> bool:
        return self._done

    def pending_page(self) -> Optional[int]:
        """Index of the page to fetch before the next item, if any.

        Returns ``None`` when an item is ready or when the listing is over;
        in the latter case the cursor is marked done.
        """
        if self._done or self._items:
            return None
        next_page = self._current.next_page
        if next_page is None:
            self._done = True
        return next_page

    def advance(self, page: Page[T]) -> None:
        """Replace the current page with a freshly fetched one."""
        self._current = page
        self.pages_fetched += 1
        self._items.extend(page.docs)
        logger.debug(
            "Fetched page with %d docs (prev=%s, next=%s, total=%d)",
            len(page.docs),
            page.prev_page,
            page.next_page,
            page.total_docs,
        )

    def pop(self) -> T:
        return self._items.popleft()

    def fail(self) -> None:
        """Stop the traversal after a failed fetch."""
        self._done = True
        self._items.clear()


class PageIterator(Iterator[T]):
    """Blocking iterator over every document of a paginated listing.

    Parameters:
        fetch: Callable returning the ``Page`` at a given index; it may raise.
        start_page: Index of the first page to fetch.
    """

    def __init__(self, fetch: Callable[[int], Page[T]], start_page: int = 0) -> None:
        self._fetch = fetch
        self._cursor: PageCursor[T] = PageCursor(start_page)

    @property
    def page(self) -> Optional[Page[T]]:
        """The most recently fetched page, ``None`` before the first fetch."""
        return self._cursor.page

    @property
    def pages_fetched(self) -> int:
        return self._cursor.pages_fetched

    def __iter__(self) -> "PageIterator[T]":
        return self

    def __next__(self) -> T:
        cursor = self._cursor
        while (index := cursor.pending_page()) is not None:
            try:
                page = self._fetch(index)
            except Exception:
                cursor.fail()
                raise
            cursor.advance(page)
        if cursor.done:
            raise StopIteration
        return cursor.pop()


class AsyncPageIterator(AsyncIterator[T]):
    """Non-blocking iterator over every document of a paginated listing.

    The producing task only suspends while a page is being fetched; documents
    already on hand are returned without awaiting anything.

    Parameters:
        fetch: Coroutine function returning the ``Page`` at a given index.
        start_page: Index of the first page to fetch.
    """

    def __init__(
        self, fetch: Callable[[int], Awaitable[Page[T]]], start_page: int = 0
    ) -> None:
        self._fetch = fetch
        self._cursor: PageCursor[T] = PageCursor(start_page)

    @property
    def page(self) -> Optional[Page[T]]:
        """The most recently fetched page, ``None`` before the first fetch."""
        return self._cursor.page

    @property
    def pages_fetched(self) -> int:
        return self._cursor.pages_fetched

    def __aiter__(self) -> "AsyncPageIterator[T]":
        return self

    async def __anext__(self) -> T:
        cursor = self._cursor
        while (index := cursor.pending_page()) is not None:
            try:
                page = await self._fetch(index)
            except Exception:
                cursor.fail()
                raise
            cursor.advance(page)
        if cursor.done:
            raise StopAsyncIteration
        return cursor.pop()
