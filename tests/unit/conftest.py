"""Pytest configuration and shared fixtures for unit tests."""

import copy
import json
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name):
    """Load a JSON fixture from the fixtures directory.

    Args:
        name: Fixture name without the .json extension (e.g. "map")

    Returns:
        The decoded JSON document.
    """
    with open(FIXTURES_DIR / f"{name}.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def map_payload():
    """Wire form of map 2144 ("Shut Up and Dance")."""
    return load_fixture("map")


@pytest.fixture
def user_detail_payload():
    return load_fixture("user_detail")


@pytest.fixture
def make_map_payload(map_payload):
    """Factory for map documents that differ by key, name and hash."""

    def make(key):
        payload = copy.deepcopy(map_payload)
        payload["key"] = format(key, "x")
        payload["name"] = f"Map {key:x}"
        payload["hash"] = format(key, "040x")
        return payload

    return make


@pytest.fixture
def make_page_payload(make_map_payload):
    """Factory for one page of a map listing.

    The page holds one map per key in *keys*; ``prevPage`` is derived from
    *page* and ``nextPage`` defaults to ``None`` (terminal page).
    """

    def make(keys, page=0, next_page=None, total_docs=None, last_page=None):
        return {
            "docs": [make_map_payload(key) for key in keys],
            "totalDocs": len(keys) if total_docs is None else total_docs,
            "lastPage": page if last_page is None else last_page,
            "prevPage": page - 1 if page > 0 else None,
            "nextPage": next_page,
        }

    return make


@pytest.fixture
def rate_limit_body():
    """Body of a 429 response expiring five seconds after 2023-11-14T22:13:20Z."""
    return json.dumps({"reset": 1700000000000, "resetAfter": 5000}).encode()
