"""Request settings shared by every transport backend."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, MutableMapping

from ..system import USER_AGENT


def _default_headers() -> Dict[str, str]:
    return {"User-Agent": USER_AGENT}


@dataclass
class RequestConfig:
    """Configuration applied to every GET a transport performs."""

    timeout: float = 30
    headers: MutableMapping[str, str] = field(default_factory=_default_headers)

    def merged_headers(self) -> Dict[str, str]:
        """Return a copy of the headers, always carrying a User-Agent."""
        headers = _default_headers()
        headers.update(self.headers)
        return headers
