"""Page container shared by every paginated listing."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

from . import _decode

T = TypeVar("T")


@total_ordering
@dataclass(frozen=True, eq=False)
class Page(Generic[T]):
    """One batch of a paginated BeatSaver listing.

    ``next_page`` is ``None`` only on the terminal page and ``prev_page`` is
    ``None`` only on the first page. Pages compare by ``prev_page`` so that
    a sorted list of pages follows listing order.
    """

    docs: Tuple[T, ...]
    total_docs: int
    last_page: int
    prev_page: Optional[int] = None
    next_page: Optional[int] = None

    @classmethod
    def from_json(cls, payload: Any, item: Callable[[Any], T]) -> "Page[T]":
        return cls(
            docs=tuple(item(doc) for doc in _decode.array(payload, "docs")),
            total_docs=_decode.integer(payload, "totalDocs", "total_docs"),
            last_page=_decode.integer(payload, "lastPage", "last_page"),
            prev_page=_decode.optional(payload, "prevPage", "prev_page", kind=int),
            next_page=_decode.optional(payload, "nextPage", "next_page", kind=int),
        )

    @classmethod
    def empty(cls, next_page: Optional[int] = None) -> "Page[T]":
        """A page with no documents, optionally pointing at *next_page*."""
        return cls(docs=(), total_docs=0, last_page=0, next_page=next_page)

    def __len__(self) -> int:
        return len(self.docs)

    def __iter__(self):
        return iter(self.docs)

    def _order_key(self) -> Tuple[int, int]:
        return (0, 0) if self.prev_page is None else (1, self.prev_page)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Page):
            return NotImplemented
        return self.prev_page == other.prev_page

    def __lt__(self, other: "Page[Any]") -> bool:
        if not isinstance(other, Page):
            return NotImplemented
        return self._order_key() < other._order_key()

    def __hash__(self) -> int:
        return hash(self.prev_page)
