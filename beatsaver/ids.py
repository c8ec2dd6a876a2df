"""Identifiers accepted by the BeatSaver API.

Maps are addressed either by their short hexadecimal key or by the 40
character hash of their archive. Users are addressed by a 24 character
account id. The two hash-like identifiers are kept as separate types.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from ._core._validators import MAP_HASH_LENGTH, is_hex, require_user_id
from .exceptions import MapIdError

if TYPE_CHECKING:
    from .models import Map, User


class MapId(ABC):
    """A map identifier: either a ``MapKey`` or a ``MapHash``.

    Examples:
        >>> MapId.parse("2144")
        MapKey(key=8516)
        >>> MapId.parse("89cf8bb07afb3c59ae7b5ac00337d62261c36fb4")
        MapHash(hash='89cf8bb07afb3c59ae7b5ac00337d62261c36fb4')
    """

    __slots__ = ()

    @staticmethod
    def parse(value: str) -> "MapId":
        """Parse *value* as a map hash (40 characters) or a hexadecimal key.

        Raises:
            MapIdError: if *value* is neither.
        """
        if len(value) == MAP_HASH_LENGTH:
            return MapHash(value)
        if not is_hex(value):
            raise MapIdError(MapIdError.INVALID_KEY, value)
        return MapKey(int(value, 16))

    @staticmethod
    def from_map(map: "Map") -> "MapHash":
        return MapHash(map.hash)

    @staticmethod
    def of(value: Union["MapId", "Map", str]) -> "MapId":
        """Coerce a ``MapId``, a decoded ``Map`` or id text to a ``MapId``."""
        if isinstance(value, MapId):
            return value
        if isinstance(value, str):
            return MapId.parse(value)
        return MapId.from_map(value)

    @abstractmethod
    def detail_path(self) -> str:
        """API path returning the map record."""

    @abstractmethod
    def download_path(self) -> str:
        """API path returning the zipped map."""


@dataclass(frozen=True)
class MapKey(MapId):
    """A map key; rendered in lowercase hexadecimal in URLs."""

    key: int

    def __post_init__(self) -> None:
        if self.key < 0:
            raise MapIdError(MapIdError.INVALID_KEY, str(self.key))

    @property
    def hex(self) -> str:
        return format(self.key, "x")

    def detail_path(self) -> str:
        return f"api/maps/detail/{self.hex}"

    def download_path(self) -> str:
        return f"api/download/key/{self.hex}"

    def __str__(self) -> str:
        return f"map key {self.key}"


@dataclass(frozen=True)
class MapHash(MapId):
    """A 40 character hexadecimal map hash."""

    hash: str

    def __post_init__(self) -> None:
        if len(self.hash) != MAP_HASH_LENGTH or not is_hex(self.hash):
            raise MapIdError(MapIdError.INVALID_HASH, self.hash)

    def detail_path(self) -> str:
        return f"api/maps/by-hash/{self.hash}"

    def download_path(self) -> str:
        return f"api/download/hash/{self.hash}"

    def __str__(self) -> str:
        return f"map hash {self.hash}"


@dataclass(frozen=True)
class UserId:
    """A validated 24 character hexadecimal account id."""

    value: str

    def __post_init__(self) -> None:
        require_user_id(self.value)

    @classmethod
    def of(cls, user: Union["UserId", "User", str]) -> "UserId":
        if isinstance(user, UserId):
            return user
        if isinstance(user, str):
            return cls(user)
        return cls(user.id)

    def __str__(self) -> str:
        return self.value
