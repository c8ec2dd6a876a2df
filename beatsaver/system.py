"""BeatSaver deployments the client can talk to."""

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib.metadata import version
from urllib.parse import urljoin

USER_AGENT = f"beatsaver/{version('beatsaver')}"


@dataclass(frozen=True)
class System:
    """A BeatSaver deployment.

    Attributes:
        base_url: Root URL every API path is resolved against.
        name: Short label used in logs and reprs.
    """

    base_url: str
    name: str = "prod"

    def __post_init__(self) -> None:
        if not self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url + "/")

    def url(self, path: str) -> str:
        """Resolve an API path (e.g. ``api/maps/hot/0``) against the base URL."""
        return urljoin(self.base_url, path)

    @classmethod
    def from_environment(cls) -> System:
        """Build a system from ``BEATSAVER_URL``, falling back to ``PROD``."""
        base_url = os.environ.get("BEATSAVER_URL")
        if not base_url:
            return PROD
        return cls(base_url=base_url, name="custom")


PROD = System(base_url="https://beatsaver.com/")
