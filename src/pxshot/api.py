"""Synchronous Pxshot API.

Every call is a single HTTP round trip. Nothing is retried or cached.
Transport failures (connection errors, timeouts) surface as httpx exceptions.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Optional, Union

import httpx

from .config import Client
from .errors import ValidationError
from .request import (
    PreparedRequest,
    build_screenshot_request,
    build_usage_request,
    read_response,
)
from .storage import PathT, write_image
from .types import ScreenshotOptions, ScreenshotResult, StoredScreenshot, UsageStats, as_options

logger = logging.getLogger(__name__)

Options = Union[ScreenshotOptions, Mapping[str, Any]]


@contextmanager
def _http(client: Client, http_client: Optional[httpx.Client]) -> Iterator[httpx.Client]:
    if http_client is not None:
        yield http_client
        return
    with httpx.Client(timeout=client.timeout) as owned:
        yield owned


def _send(
    client: Client,
    prepared: PreparedRequest,
    http_client: Optional[httpx.Client],
) -> Union[bytes, dict[str, Any]]:
    logger.debug(f"Sending {prepared.method} {prepared.url} (as_json={prepared.as_json})")
    with _http(client, http_client) as http:
        response = http.request(
            prepared.method,
            prepared.url,
            headers=prepared.headers,
            json=prepared.json,
            timeout=client.timeout,
        )
    return read_response(prepared, response)


def screenshot(
    client: Client,
    options: Options,
    *,
    http_client: Optional[httpx.Client] = None,
) -> ScreenshotResult:
    """Take a screenshot of a URL.

    Args:
        client: A client created with ``pxshot.client``
        options: ScreenshotOptions, or a mapping with camelCase keys
                 ("url", "format", "quality", "width", "height", "fullPage",
                 "waitUntil", "waitForSelector", "waitForTimeout",
                 "deviceScaleFactor", "store", "blockAds"). Unknown keys
                 are ignored.
        http_client: Optional httpx.Client to send the request with. It is
                     left open. By default a client is created per call.

    Returns:
        - When "store" is false or absent: the image bytes
        - When "store" is true: dict with "url", "expiresAt", "width",
          "height", "sizeBytes"

    Raises:
        ValidationError: If "url" is missing. No request is sent.
        ApiError: If the API answers with a non-2xx status

    Examples:
        image = screenshot(c, {"url": "https://example.com"})

        result = screenshot(c, {"url": "https://example.com", "store": True, "fullPage": True})
        result["url"]  # "https://storage.pxshot.com/..."
    """
    opts = as_options(options)
    if not opts.get("url"):
        raise ValidationError("URL is required")
    return _send(client, build_screenshot_request(client, opts), http_client)


def screenshot_or_throw_bytes(
    client: Client,
    options: Options,
    *,
    http_client: Optional[httpx.Client] = None,
) -> bytes:
    """Same as ``screenshot`` but ignores "store" and always returns bytes."""
    opts = as_options(options)
    opts.pop("store", None)
    return screenshot(client, opts, http_client=http_client)


def usage(client: Client, *, http_client: Optional[httpx.Client] = None) -> UsageStats:
    """Get API usage statistics.

    Returns:
        Usage dict with camelCase keys, e.g.
        {"screenshotsToday": 42, "screenshotsMonth": 1337, "plan": "pro"}

    Raises:
        ApiError: If the API answers with a non-2xx status
    """
    return _send(client, build_usage_request(client), http_client)


def screenshot_url(
    client: Client,
    options: Options,
    *,
    http_client: Optional[httpx.Client] = None,
) -> StoredScreenshot:
    """Take a screenshot, store it server-side and return its metadata.

    Forces "store" to True. Returns a dict with "url", "expiresAt", "width",
    "height" and "sizeBytes".
    """
    opts = as_options(options)
    opts["store"] = True
    return screenshot(client, opts, http_client=http_client)


def screenshot_bytes(
    client: Client,
    options: Options,
    *,
    http_client: Optional[httpx.Client] = None,
) -> bytes:
    """Take a screenshot and return the raw image bytes. "store" is ignored."""
    return screenshot_or_throw_bytes(client, options, http_client=http_client)


def save_screenshot(
    client: Client,
    options: Options,
    path: PathT,
    *,
    http_client: Optional[httpx.Client] = None,
) -> PathT:
    """Take a screenshot and write it to ``path``, overwriting any existing file.

    Returns:
        ``path``, unchanged

    Example:
        save_screenshot(c, {"url": "https://example.com"}, "screenshot.png")
    """
    image = screenshot_bytes(client, options, http_client=http_client)
    return write_image(path, image)
