"""Tests for PageIterator and AsyncPageIterator."""

import pytest

from beatsaver import AsyncPageIterator, Page, PageIterator, TransportError
from beatsaver.pagination import PageCursor


def page(docs, prev_page=None, next_page=None):
    return Page(
        docs=tuple(docs),
        total_docs=len(docs),
        last_page=0,
        prev_page=prev_page,
        next_page=next_page,
    )


class FakeListing:
    """Serve pages (or errors) by index and record every fetch."""

    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    def fetch(self, index):
        self.calls.append(index)
        result = self.pages[index]
        if isinstance(result, Exception):
            raise result
        return result

    async def afetch(self, index):
        return self.fetch(index)


@pytest.fixture
def three_pages():
    return FakeListing(
        {
            0: page(["A", "B"], next_page=1),
            1: page(["C"], prev_page=0, next_page=2),
            2: page(["D", "E"], prev_page=1),
        }
    )


class TestPageIterator:
    """Blocking iteration over a paginated listing."""

    def test_concatenates_pages_in_order(self, three_pages) -> None:
        """Documents of every page come out in listing order."""
        assert list(PageIterator(three_pages.fetch)) == ["A", "B", "C", "D", "E"]
        assert three_pages.calls == [0, 1, 2]

    def test_lazy_until_first_pull(self, three_pages) -> None:
        """Nothing is fetched until the first element is requested."""
        iterator = PageIterator(three_pages.fetch)
        assert three_pages.calls == []
        assert iterator.page is None

        assert next(iterator) == "A"
        assert three_pages.calls == [0]

    def test_fetches_next_page_only_when_drained(self, three_pages) -> None:
        iterator = PageIterator(three_pages.fetch)

        next(iterator)
        next(iterator)
        assert three_pages.calls == [0]
        next(iterator)
        assert three_pages.calls == [0, 1]
        assert iterator.pages_fetched == 2
        assert iterator.page.prev_page == 0

    def test_terminal_page_stops_without_fetching(self) -> None:
        """A page without next_page ends the listing."""
        listing = FakeListing({0: page(["A"])})
        iterator = PageIterator(listing.fetch)

        assert list(iterator) == ["A"]
        with pytest.raises(StopIteration):
            next(iterator)
        assert listing.calls == [0]

    def test_skips_empty_intermediate_pages(self) -> None:
        """Empty pages with a next page are followed transparently."""
        listing = FakeListing(
            {
                0: page([], next_page=1),
                1: page([], prev_page=0, next_page=2),
                2: page(["X"], prev_page=1),
            }
        )

        assert list(PageIterator(listing.fetch)) == ["X"]
        assert listing.calls == [0, 1, 2]

    def test_empty_terminal_page(self) -> None:
        listing = FakeListing({0: page([])})

        assert list(PageIterator(listing.fetch)) == []
        assert listing.calls == [0]

    def test_starts_at_requested_page(self, three_pages) -> None:
        assert list(PageIterator(three_pages.fetch, start_page=1)) == ["C", "D", "E"]
        assert three_pages.calls == [1, 2]

    def test_error_is_raised_in_place_then_stops(self) -> None:
        """A failed fetch surfaces after the documents already received."""
        error = TransportError("connection reset")
        listing = FakeListing(
            {
                0: page(["C", "D"], next_page=1),
                1: error,
                2: page(["never"], prev_page=1),
            }
        )
        iterator = PageIterator(listing.fetch)

        assert next(iterator) == "C"
        assert next(iterator) == "D"
        with pytest.raises(TransportError) as excinfo:
            next(iterator)
        assert excinfo.value is error

        with pytest.raises(StopIteration):
            next(iterator)
        assert listing.calls == [0, 1]

    def test_error_on_first_page(self) -> None:
        listing = FakeListing({0: TransportError("unreachable")})
        iterator = PageIterator(listing.fetch)

        with pytest.raises(TransportError):
            next(iterator)
        assert list(iterator) == []
        assert listing.calls == [0]


class TestAsyncPageIterator:
    """Asyncio iteration yields exactly what blocking iteration yields."""

    @pytest.mark.asyncio
    async def test_concatenates_pages_in_order(self, three_pages) -> None:
        docs = [doc async for doc in AsyncPageIterator(three_pages.afetch)]

        assert docs == ["A", "B", "C", "D", "E"]
        assert three_pages.calls == [0, 1, 2]

    @pytest.mark.asyncio
    async def test_lazy_until_first_pull(self, three_pages) -> None:
        iterator = AsyncPageIterator(three_pages.afetch)
        assert three_pages.calls == []

        assert await iterator.__anext__() == "A"
        assert await iterator.__anext__() == "B"
        assert three_pages.calls == [0]
        assert iterator.pages_fetched == 1

    @pytest.mark.asyncio
    async def test_skips_empty_intermediate_pages(self) -> None:
        listing = FakeListing(
            {
                0: page([], next_page=1),
                1: page(["X", "Y"], prev_page=0),
            }
        )

        docs = [doc async for doc in AsyncPageIterator(listing.afetch)]

        assert docs == ["X", "Y"]
        assert listing.calls == [0, 1]

    @pytest.mark.asyncio
    async def test_starts_at_requested_page(self, three_pages) -> None:
        docs = [doc async for doc in AsyncPageIterator(three_pages.afetch, start_page=2)]

        assert docs == ["D", "E"]
        assert three_pages.calls == [2]

    @pytest.mark.asyncio
    async def test_error_is_raised_in_place_then_stops(self) -> None:
        listing = FakeListing(
            {
                0: page(["C", "D"], next_page=1),
                1: TransportError("connection reset"),
            }
        )
        iterator = AsyncPageIterator(listing.afetch)
        received = []

        with pytest.raises(TransportError):
            async for doc in iterator:
                received.append(doc)

        assert received == ["C", "D"]
        with pytest.raises(StopAsyncIteration):
            await iterator.__anext__()
        assert listing.calls == [0, 1]


class TestPageCursor:
    def test_starts_from_an_empty_page_pointing_at_start(self) -> None:
        cursor = PageCursor(start_page=4)

        assert cursor.page is None
        assert cursor.pending_page() == 4
        assert not cursor.done

    def test_advance_replaces_the_current_page(self) -> None:
        cursor = PageCursor()
        fetched = page(["A"], next_page=1)

        cursor.advance(fetched)

        assert cursor.page is fetched
        assert cursor.pending_page() is None
        assert cursor.pop() == "A"
        assert cursor.pending_page() == 1

    def test_terminal_page_marks_done(self) -> None:
        cursor = PageCursor()
        cursor.advance(page([]))

        assert cursor.pending_page() is None
        assert cursor.done
