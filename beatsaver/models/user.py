"""User records returned by the BeatSaver API."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .._core import _decode


@dataclass(frozen=True)
class User:
    """A BeatSaver account as embedded in map listings.

    Two users are equal when their ids match, regardless of display name.

    Attributes:
        id: Account id, 24 hex characters (e.g. ``5fbe7cd60192c700062b2a1f``)
        username: Display name (e.g. ``qwerty01``)
    """

    id: str
    username: str = field(compare=False)

    @classmethod
    def from_json(cls, payload: Any) -> "User":
        return cls(
            id=_decode.text(payload, "_id", "id"),
            username=_decode.text(payload, "username"),
        )

    def __str__(self) -> str:
        return self.username


@dataclass(frozen=True)
class UserDiffStats:
    """Number of difficulties a user has mapped, per difficulty."""

    total: int
    easy: int
    normal: int
    hard: int
    expert: int
    expert_plus: int

    @classmethod
    def from_json(cls, payload: Any) -> "UserDiffStats":
        return cls(
            total=_decode.integer(payload, "total"),
            easy=_decode.integer(payload, "easy"),
            normal=_decode.integer(payload, "normal"),
            hard=_decode.integer(payload, "hard"),
            expert=_decode.integer(payload, "expert"),
            expert_plus=_decode.integer(payload, "expertPlus", "expert_plus"),
        )


@dataclass(frozen=True)
class UserStats:
    """Aggregated statistics over the maps a user uploaded."""

    total_upvotes: int
    total_downvotes: int
    total_maps: int
    ranked_maps: int
    average_bpm: float
    average_score: float
    average_duration: float
    first_upload: datetime
    last_upload: datetime
    diff_stats: UserDiffStats

    @classmethod
    def from_json(cls, payload: Any) -> "UserStats":
        return cls(
            total_upvotes=_decode.integer(payload, "totalUpvotes"),
            total_downvotes=_decode.integer(payload, "totalDownvotes"),
            total_maps=_decode.integer(payload, "totalMaps"),
            ranked_maps=_decode.integer(payload, "rankedMaps"),
            average_bpm=_decode.number(payload, "avgBpm"),
            average_score=_decode.number(payload, "avgScore"),
            average_duration=_decode.number(payload, "avgDuration"),
            first_upload=_decode.timestamp(payload, "firstUpload"),
            last_upload=_decode.timestamp(payload, "lastUpload"),
            diff_stats=UserDiffStats.from_json(_decode.mapping(payload, "diffStats")),
        )


@dataclass(frozen=True)
class UserDetail:
    """Full profile of a user, including upload statistics."""

    id: int
    name: str
    hash: str
    avatar: str
    stats: UserStats

    @classmethod
    def from_json(cls, payload: Any) -> "UserDetail":
        return cls(
            id=_decode.integer(payload, "id"),
            name=_decode.text(payload, "name"),
            hash=_decode.text(payload, "hash"),
            avatar=_decode.text(payload, "avatar"),
            stats=UserStats.from_json(_decode.mapping(payload, "stats")),
        )
