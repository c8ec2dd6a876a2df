"""Tests for deployment and request configuration."""

import pytest

from beatsaver import PROD, System
from beatsaver._core._request import RequestConfig
from beatsaver.system import USER_AGENT


class TestSystem:
    def test_prod(self) -> None:
        assert PROD.base_url == "https://beatsaver.com/"
        assert PROD.url("api/maps/hot/0") == "https://beatsaver.com/api/maps/hot/0"

    def test_trailing_slash_is_added(self) -> None:
        system = System("http://localhost:8080/mirror")

        assert system.base_url == "http://localhost:8080/mirror/"
        assert system.url("api/search/text/0?q=a%20b") == (
            "http://localhost:8080/mirror/api/search/text/0?q=a%20b"
        )

    def test_from_environment_defaults_to_prod(self, monkeypatch) -> None:
        monkeypatch.delenv("BEATSAVER_URL", raising=False)

        assert System.from_environment() is PROD

    def test_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("BEATSAVER_URL", "http://localhost:8080")

        system = System.from_environment()

        assert system == System("http://localhost:8080/", name="custom")


class TestRequestConfig:
    def test_defaults(self) -> None:
        config = RequestConfig()

        assert config.timeout == 30
        assert config.merged_headers() == {"User-Agent": USER_AGENT}

    def test_user_agent_is_kept(self) -> None:
        """Custom headers are added to the User-Agent, not instead of it."""
        config = RequestConfig(headers={"Accept": "application/json"})

        assert config.merged_headers() == {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        }

    def test_user_agent_can_be_overridden(self) -> None:
        config = RequestConfig(headers={"User-Agent": "my-tool/1.0"})

        assert config.merged_headers()["User-Agent"] == "my-tool/1.0"

    @pytest.mark.parametrize("timeout", [0.5, 10])
    def test_timeout(self, timeout) -> None:
        assert RequestConfig(timeout=timeout).timeout == timeout
