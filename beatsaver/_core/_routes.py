"""Request plans for every BeatSaver API operation.

A ``Route`` pairs the path of one request with the function that decodes its
body. The blocking and the asyncio clients both build their requests here and
only differ in how they perform the GET.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar, Union
from urllib.parse import quote

from ..exceptions import ArgumentError
from ..ids import MapId, UserId
from ..models import Map, Page, User
from . import _decode
from ._validators import require_page

T = TypeVar("T")


class SortOrder(str, Enum):
    """Orderings offered by the ``api/maps/{order}/{page}`` listings."""

    HOT = "hot"
    RATING = "rating"
    LATEST = "latest"
    DOWNLOADS = "downloads"
    PLAYS = "plays"


@dataclass(frozen=True)
class Route(Generic[T]):
    path: str
    decode: Callable[[bytes], T]


def _json(factory: Callable[[Any], T]) -> Callable[[bytes], T]:
    def decode(body: bytes) -> T:
        return factory(_decode.decode_json(body))

    return decode


def _maps_page(payload: Any) -> Page[Map]:
    return Page.from_json(payload, Map.from_json)


def _raw(body: bytes) -> bytes:
    return body


def encode_query(query: str) -> str:
    """Percent-encode search text, leaving only unreserved characters as is."""
    return quote(query, safe="")


def map_detail(map_id: MapId) -> Route[Map]:
    return Route(map_id.detail_path(), _json(Map.from_json))


def download(map_id: MapId) -> Route[bytes]:
    return Route(map_id.download_path(), _raw)


def user(user_id: UserId) -> Route[User]:
    return Route(f"api/users/find/{user_id}", _json(User.from_json))


def maps_by_uploader(user_id: UserId, page: int) -> Route[Page[Map]]:
    return Route(f"api/maps/uploader/{user_id}/{require_page(page)}", _json(_maps_page))


def sort_order(order: Union[SortOrder, str]) -> SortOrder:
    try:
        return SortOrder(order)
    except ValueError as exc:
        raise ArgumentError("order", f"expected one of {[o.value for o in SortOrder]}") from exc


def maps_sorted(order: Union[SortOrder, str], page: int) -> Route[Page[Map]]:
    return Route(f"api/maps/{sort_order(order).value}/{require_page(page)}", _json(_maps_page))


def search_text(query: str, page: int) -> Route[Page[Map]]:
    return Route(
        f"api/search/text/{require_page(page)}?q={encode_query(query)}",
        _json(_maps_page),
    )


def search_advanced(query: str, page: int) -> Route[Page[Map]]:
    return Route(
        f"api/search/advanced/{require_page(page)}?q={encode_query(query)}",
        _json(_maps_page),
    )
