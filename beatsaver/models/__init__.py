"""Typed records decoded from BeatSaver API responses."""

from .._core._models import Page
from .map import (
    DifficultyDetail,
    Map,
    MapCharacteristic,
    MapDifficulties,
    MapDifficultyCharacteristics,
    MapMetadata,
    MapStats,
)
from .user import User, UserDetail, UserDiffStats, UserStats

__all__ = [
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
]
