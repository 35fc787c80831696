"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import httpx

DEFAULT_BASE_URL = "https://api.pxshot.com"
DEFAULT_TIMEOUT_MS = 30000


@dataclass(frozen=True)
class Client:
    """Immutable Pxshot client settings.

    A Client holds no connection state and can be shared freely between
    threads and tasks.
    """

    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    @property
    def timeout(self) -> httpx.Timeout:
        """Request timeout applied to connect, read, write and pool phases."""
        return httpx.Timeout(self.timeout_ms / 1000)


def _first(*values: Any) -> Any:
    return next(v for v in values if v is not None)


def client(
    api_key: str,
    config: Optional[Mapping[str, Any]] = None,
    *,
    base_url: Optional[str] = None,
    timeout_ms: Optional[int] = None,
) -> Client:
    """Create a Pxshot client.

    Args:
        api_key: Your Pxshot API key (e.g. "px_...")
        config: Optional mapping with "baseUrl"/"timeoutMs"
                (or "base_url"/"timeout_ms")
        base_url: API base URL (default: https://api.pxshot.com)
        timeout_ms: Request timeout in milliseconds (default: 30000)

    Keyword arguments take precedence over ``config``. Only missing or None
    values fall back to the defaults; ``0`` and ``""`` are kept as given.
    The key format is not checked.

    Examples:
        c = client("px_your_api_key")
        c = client("px_your_api_key", {"timeoutMs": 60000})
        c = client("px_your_api_key", base_url="https://staging.pxshot.com")
    """
    config = config or {}
    return Client(
        api_key=api_key,
        base_url=_first(base_url, config.get("baseUrl"), config.get("base_url"), DEFAULT_BASE_URL),
        timeout_ms=_first(
            timeout_ms, config.get("timeoutMs"), config.get("timeout_ms"), DEFAULT_TIMEOUT_MS
        ),
    )
