"""Tests for rate limit classification."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from beatsaver import (
    DecodeError,
    EncodingError,
    RateLimitError,
    RateLimitInfo,
    classify,
    parse_rate_limit,
)

RESET = datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)


class TestClassify:
    """classify() passes bodies through unless the status is 429."""

    @pytest.mark.parametrize("status", [200, 204, 301, 404, 500])
    def test_other_statuses_pass_through(self, status) -> None:
        body = b"not even json"

        assert classify(status, body) is body

    def test_429_raises_rate_limit_error(self, rate_limit_body) -> None:
        with pytest.raises(RateLimitError) as excinfo:
            classify(429, rate_limit_body)

        error = excinfo.value
        assert error.reset == RESET
        assert error.reset_after == timedelta(seconds=5)
        assert error.info == RateLimitInfo(reset=RESET, reset_after=timedelta(seconds=5))
        assert "5000 ms" in str(error)

    def test_429_with_invalid_utf8(self) -> None:
        with pytest.raises(EncodingError):
            classify(429, b"\xff\xfe\xfd")

    def test_429_with_invalid_json(self) -> None:
        with pytest.raises(DecodeError) as excinfo:
            classify(429, b"{reset: soon}")
        assert not isinstance(excinfo.value, EncodingError)

    def test_429_with_missing_field(self) -> None:
        with pytest.raises(DecodeError, match="resetAfter"):
            classify(429, json.dumps({"reset": 1700000000000}).encode())


class TestRateLimitInfo:
    def test_parse(self, rate_limit_body) -> None:
        info = parse_rate_limit(rate_limit_body)

        assert info.reset == RESET
        assert info.reset.tzinfo is not None
        assert info.reset_after == timedelta(milliseconds=5000)

    def test_negative_reset_after_is_rejected(self) -> None:
        body = json.dumps({"reset": 1700000000000, "resetAfter": -1}).encode()

        with pytest.raises(DecodeError):
            parse_rate_limit(body)

    def test_equality_and_order_use_reset_only(self) -> None:
        """Two infos with the same reset are equal whatever resetAfter says."""
        first = RateLimitInfo(reset=RESET, reset_after=timedelta(seconds=1))
        same = RateLimitInfo(reset=RESET, reset_after=timedelta(seconds=9))
        later = RateLimitInfo(reset=RESET + timedelta(seconds=1), reset_after=timedelta(0))

        assert first == same
        assert hash(first) == hash(same)
        assert first < later
        assert sorted([later, first]) == [first, later]

    def test_str(self) -> None:
        info = RateLimitInfo(reset=RESET, reset_after=timedelta(seconds=5))

        assert str(info) == f"Rate limited, expiring {RESET}"


class TestOutOfRangeBodies:
    """Bodies Python cannot represent are decode errors, not crashes."""

    def test_reset_beyond_datetime_range(self) -> None:
        body = json.dumps({"reset": 10**20, "resetAfter": 5000}).encode()

        with pytest.raises(DecodeError, match="'reset'"):
            classify(429, body)

    def test_reset_after_beyond_timedelta_range(self) -> None:
        body = json.dumps({"reset": 1700000000000, "resetAfter": 10**20}).encode()

        with pytest.raises(DecodeError, match="resetAfter"):
            classify(429, body)

    def test_integer_with_thousands_of_digits(self) -> None:
        body = b'{"reset": ' + b"1" * 5000 + b', "resetAfter": 5000}'

        with pytest.raises(DecodeError):
            classify(429, body)

    def test_deeply_nested_body(self) -> None:
        with pytest.raises(DecodeError):
            classify(429, b"[" * 200000)

    def test_message_counts_exact_milliseconds(self) -> None:
        info = RateLimitInfo(reset=RESET, reset_after=timedelta(milliseconds=4321))

        assert str(RateLimitError(info)) == "API rate limit hit (retry in 4321 ms)"
