"""Helpers turning raw response bodies into checked Python values.

Record classes read their fields through these helpers so that a missing
field, or a field of the wrong type, surfaces as ``DecodeError`` instead of a
bare ``KeyError``/``TypeError``.
"""

from __future__ import annotations

import json
from collections import abc
from datetime import datetime, timedelta, timezone
from typing import Any, List, Mapping, Optional, Tuple, Type, Union

from ..exceptions import DecodeError, EncodingError

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MISSING = object()

TypeSpec = Union[Type, Tuple[Type, ...]]


def decode_json(body: bytes) -> Any:
    """Decode a response body as UTF-8 JSON."""
    try:
        decoded = body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EncodingError(f"response body is not valid UTF-8: {exc}", cause=exc) from exc
    try:
        return json.loads(decoded)
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError, oversized integers and nesting too deep to parse
        raise DecodeError(f"response body is not valid JSON: {exc!r}", cause=exc) from exc


def _lookup(payload: Any, names: Tuple[str, ...], default: Any) -> Any:
    if not isinstance(payload, abc.Mapping):
        raise DecodeError(f"expected a JSON object, got {type(payload).__name__}")
    for name in names:
        if name in payload:
            return payload[name]
    if default is _MISSING:
        raise DecodeError(f"missing field {names[0]!r}")
    return default


def _check(value: Any, name: str, kinds: TypeSpec) -> Any:
    # bool is an int subclass, JSON true/false must not pass as numbers
    if isinstance(value, bool) and bool not in (kinds if isinstance(kinds, tuple) else (kinds,)):
        raise DecodeError(f"field {name!r} has unexpected type bool")
    if not isinstance(value, kinds):
        raise DecodeError(f"field {name!r} has unexpected type {type(value).__name__}")
    return value


def field(payload: Any, *names: str, kind: TypeSpec) -> Any:
    """Read a required field, accepting any of *names* as an alias."""
    return _check(_lookup(payload, names, _MISSING), names[0], kind)


def optional(payload: Any, *names: str, kind: TypeSpec) -> Any:
    """Read a field that may be absent or ``null``."""
    value = _lookup(payload, names, None)
    if value is None:
        return None
    return _check(value, names[0], kind)


def integer(payload: Any, *names: str) -> int:
    return field(payload, *names, kind=int)


def number(payload: Any, *names: str) -> float:
    value = field(payload, *names, kind=(int, float))
    try:
        return float(value)
    except OverflowError as exc:
        raise DecodeError(f"field {names[0]!r} is out of range", cause=exc) from exc


def text(payload: Any, *names: str) -> str:
    return field(payload, *names, kind=str)


def flag(payload: Any, *names: str) -> bool:
    return field(payload, *names, kind=bool)


def mapping(payload: Any, *names: str) -> Mapping[str, Any]:
    return field(payload, *names, kind=abc.Mapping)


def array(payload: Any, *names: str) -> List[Any]:
    return field(payload, *names, kind=list)


def timestamp(payload: Any, *names: str) -> datetime:
    """Read an ISO-8601 timestamp such as ``2018-11-21T01:27:00.000Z``."""
    return parse_datetime(text(payload, *names), names[0])


def optional_timestamp(payload: Any, *names: str) -> Optional[datetime]:
    value = optional(payload, *names, kind=str)
    return None if value is None else parse_datetime(value, names[0])


def parse_datetime(value: str, name: str = "timestamp") -> datetime:
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as exc:
        raise DecodeError(f"field {name!r} is not an ISO-8601 timestamp", cause=exc) from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def from_millis(millis: int, name: str = "timestamp") -> datetime:
    """Convert a unix timestamp in milliseconds to an aware UTC datetime."""
    try:
        return _EPOCH + millis_delta(millis, name)
    except OverflowError as exc:
        raise DecodeError(f"field {name!r} is out of range", cause=exc) from exc


def millis_delta(millis: int, name: str = "duration") -> timedelta:
    """Convert a duration in milliseconds to a ``timedelta``."""
    try:
        return timedelta(milliseconds=millis)
    except OverflowError as exc:
        raise DecodeError(f"field {name!r} is out of range", cause=exc) from exc
