"""Validation helpers used by the public API."""

from __future__ import annotations

import re

from ..exceptions import ArgumentError

_HEX = re.compile(r"[0-9a-fA-F]+")

USER_ID_LENGTH = 24
MAP_HASH_LENGTH = 40


def is_hex(text: str) -> bool:
    """Return True if *text* is a non-empty run of hexadecimal digits."""
    return bool(_HEX.fullmatch(text))


def require_user_id(user_id: str) -> str:
    """Raise ``ArgumentError`` unless *user_id* is 24 hexadecimal characters."""
    if not isinstance(user_id, str) or len(user_id) != USER_ID_LENGTH or not is_hex(user_id):
        raise ArgumentError("id", f"expected {USER_ID_LENGTH} hexadecimal characters")
    return user_id


def require_page(page: int) -> int:
    """Raise ``ArgumentError`` unless *page* is a non-negative integer."""
    if isinstance(page, bool) or not isinstance(page, int) or page < 0:
        raise ArgumentError("page", "expected a non-negative integer")
    return page
