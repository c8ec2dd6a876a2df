"""Map records returned by the BeatSaver API.

Field names follow Python conventions; the camelCase names used on the wire
(``songName``, ``downloadURL``, ``_id`` ...) are mapped in ``from_json``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Tuple

from .._core import _decode
from .user import User

DIFFICULTIES = ("easy", "normal", "hard", "expert", "expert_plus")


@dataclass(frozen=True)
class MapDifficulties:
    """Which difficulties a map ships."""

    easy: bool
    normal: bool
    hard: bool
    expert: bool
    expert_plus: bool

    @classmethod
    def from_json(cls, payload: Any) -> "MapDifficulties":
        return cls(
            easy=_decode.flag(payload, "easy"),
            normal=_decode.flag(payload, "normal"),
            hard=_decode.flag(payload, "hard"),
            expert=_decode.flag(payload, "expert"),
            expert_plus=_decode.flag(payload, "expertPlus", "expert_plus"),
        )

    def available(self) -> Tuple[str, ...]:
        """Names of the difficulties present, easiest first."""
        return tuple(name for name in DIFFICULTIES if getattr(self, name))


@dataclass(frozen=True)
class DifficultyDetail:
    """Note counts and timing for one difficulty of one characteristic."""

    duration: float
    length: int
    njs: float
    njs_offset: float
    bombs: int
    notes: int
    obstacles: int

    @classmethod
    def from_json(cls, payload: Any) -> "DifficultyDetail":
        return cls(
            duration=_decode.number(payload, "duration"),
            length=_decode.integer(payload, "length"),
            njs=_decode.number(payload, "njs"),
            njs_offset=_decode.number(payload, "njsOffset", "njs_offset"),
            bombs=_decode.integer(payload, "bombs"),
            notes=_decode.integer(payload, "notes"),
            obstacles=_decode.integer(payload, "obstacles"),
        )


def _detail(payload: Any, *names: str) -> Optional[DifficultyDetail]:
    value = _decode.optional(payload, *names, kind=dict)
    return None if value is None else DifficultyDetail.from_json(value)


@dataclass(frozen=True)
class MapDifficultyCharacteristics:
    """Per-difficulty details; a slot is ``None`` when the map lacks it."""

    easy: Optional[DifficultyDetail]
    normal: Optional[DifficultyDetail]
    hard: Optional[DifficultyDetail]
    expert: Optional[DifficultyDetail]
    expert_plus: Optional[DifficultyDetail]

    @classmethod
    def from_json(cls, payload: Any) -> "MapDifficultyCharacteristics":
        return cls(
            easy=_detail(payload, "easy"),
            normal=_detail(payload, "normal"),
            hard=_detail(payload, "hard"),
            expert=_detail(payload, "expert"),
            expert_plus=_detail(payload, "expertPlus", "expert_plus"),
        )


@dataclass(frozen=True)
class MapCharacteristic:
    """A play mode (``Standard``, ``OneSaber`` ...) and its difficulties."""

    name: str
    difficulties: MapDifficultyCharacteristics

    @classmethod
    def from_json(cls, payload: Any) -> "MapCharacteristic":
        return cls(
            name=_decode.text(payload, "name"),
            difficulties=MapDifficultyCharacteristics.from_json(
                _decode.mapping(payload, "difficulties")
            ),
        )


@dataclass(frozen=True)
class MapMetadata:
    """Song and level information of a map."""

    difficulties: MapDifficulties
    duration: int
    automapper: Optional[str]
    characteristics: Tuple[MapCharacteristic, ...]
    level_author: str
    song_author: str
    song_name: str
    song_sub_name: str
    bpm: float

    @classmethod
    def from_json(cls, payload: Any) -> "MapMetadata":
        return cls(
            difficulties=MapDifficulties.from_json(_decode.mapping(payload, "difficulties")),
            duration=_decode.integer(payload, "duration"),
            automapper=_decode.optional(payload, "automapper", kind=str),
            characteristics=tuple(
                MapCharacteristic.from_json(item)
                for item in _decode.array(payload, "characteristics")
            ),
            level_author=_decode.text(payload, "levelAuthorName", "level_author"),
            song_author=_decode.text(payload, "songAuthorName", "song_author"),
            song_name=_decode.text(payload, "songName", "song_name"),
            song_sub_name=_decode.text(payload, "songSubName", "song_sub_name"),
            bpm=_decode.number(payload, "bpm"),
        )


@dataclass(frozen=True)
class MapStats:
    """Popularity counters of a map."""

    downloads: int
    plays: int
    downvotes: int
    upvotes: int
    heat: float
    rating: float

    @classmethod
    def from_json(cls, payload: Any) -> "MapStats":
        return cls(
            downloads=_decode.integer(payload, "downloads"),
            plays=_decode.integer(payload, "plays"),
            downvotes=_decode.integer(payload, "downVotes", "downvotes"),
            upvotes=_decode.integer(payload, "upVotes", "upvotes"),
            heat=_decode.number(payload, "heat"),
            rating=_decode.number(payload, "rating"),
        )


@dataclass(frozen=True)
class Map:
    """A map (beatmap) hosted on BeatSaver.

    Attributes:
        key: Short hexadecimal key (e.g. ``2144``)
        hash: 40 character content hash of the map archive
        uploaded: Upload time, timezone aware (UTC)
        direct_download: CDN path of the zipped map
        download_url: API path that serves the zipped map
        cover_url: CDN path of the cover image
    """

    metadata: MapMetadata
    stats: MapStats
    description: str
    id: str
    key: str
    name: str
    uploader: User
    hash: str
    uploaded: datetime
    direct_download: str
    download_url: str
    cover_url: str
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_json(cls, payload: Any) -> "Map":
        return cls(
            metadata=MapMetadata.from_json(_decode.mapping(payload, "metadata")),
            stats=MapStats.from_json(_decode.mapping(payload, "stats")),
            description=_decode.text(payload, "description"),
            id=_decode.text(payload, "_id", "id"),
            key=_decode.text(payload, "key"),
            name=_decode.text(payload, "name"),
            uploader=User.from_json(_decode.mapping(payload, "uploader")),
            hash=_decode.text(payload, "hash"),
            uploaded=_decode.timestamp(payload, "uploaded"),
            direct_download=_decode.text(payload, "directDownload", "direct_download"),
            download_url=_decode.text(payload, "downloadURL", "download_url"),
            cover_url=_decode.text(payload, "coverURL", "cover_url"),
            deleted_at=_decode.optional_timestamp(payload, "deletedAt", "deleted_at"),
        )
