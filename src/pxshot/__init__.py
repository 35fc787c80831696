"""
pxshot - Python client for the Pxshot screenshot API

Usage:
    import pxshot

    client = pxshot.client("px_your_api_key")

    # Screenshot as bytes
    image = pxshot.screenshot(client, {"url": "https://example.com"})

    # Stored screenshot (returns dict with "url")
    result = pxshot.screenshot(client, {"url": "https://example.com", "store": True})
    result["url"]  # "https://storage.pxshot.com/..."

    # Save straight to disk
    pxshot.save_screenshot(client, {"url": "https://example.com"}, "shot.png")

    # Account usage
    pxshot.usage(client)

    # Async usage
    from pxshot import aio

    image = await aio.screenshot(client, {"url": "https://example.com"})
"""

from .api import (
    save_screenshot,
    screenshot,
    screenshot_bytes,
    screenshot_or_throw_bytes,
    screenshot_url,
    usage,
)
from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS, Client, client
from .errors import ApiError, PxshotError, ValidationError
from .keys import from_wire, to_wire, transform_keys
from .types import ScreenshotOptions

__version__ = "0.1.0"

__all__ = [
    "Client",
    "client",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_MS",
    "screenshot",
    "screenshot_or_throw_bytes",
    "screenshot_url",
    "screenshot_bytes",
    "save_screenshot",
    "usage",
    "ScreenshotOptions",
    "PxshotError",
    "ValidationError",
    "ApiError",
    "to_wire",
    "from_wire",
    "transform_keys",
]
