"""Asynchronous Pxshot API.

Mirrors ``pxshot.api`` with coroutines backed by httpx.AsyncClient.

Usage:
    from pxshot import aio

    image = await aio.screenshot(c, {"url": "https://example.com"})
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional, Union

import httpx

from .api import Options
from .config import Client
from .errors import ValidationError
from .request import (
    PreparedRequest,
    build_screenshot_request,
    build_usage_request,
    read_response,
)
from .storage import PathT, write_image
from .types import ScreenshotResult, StoredScreenshot, UsageStats, as_options

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _http(
    client: Client, http_client: Optional[httpx.AsyncClient]
) -> AsyncIterator[httpx.AsyncClient]:
    if http_client is not None:
        yield http_client
        return
    async with httpx.AsyncClient(timeout=client.timeout) as owned:
        yield owned


async def _send(
    client: Client,
    prepared: PreparedRequest,
    http_client: Optional[httpx.AsyncClient],
) -> Union[bytes, dict[str, Any]]:
    logger.debug(f"Sending {prepared.method} {prepared.url} (as_json={prepared.as_json})")
    async with _http(client, http_client) as http:
        response = await http.request(
            prepared.method,
            prepared.url,
            headers=prepared.headers,
            json=prepared.json,
            timeout=client.timeout,
        )
    return read_response(prepared, response)


async def screenshot(
    client: Client,
    options: Options,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> ScreenshotResult:
    """Take a screenshot of a URL. See ``pxshot.api.screenshot``."""
    opts = as_options(options)
    if not opts.get("url"):
        raise ValidationError("URL is required")
    return await _send(client, build_screenshot_request(client, opts), http_client)


async def screenshot_or_throw_bytes(
    client: Client,
    options: Options,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> bytes:
    opts = as_options(options)
    opts.pop("store", None)
    return await screenshot(client, opts, http_client=http_client)


async def usage(client: Client, *, http_client: Optional[httpx.AsyncClient] = None) -> UsageStats:
    return await _send(client, build_usage_request(client), http_client)


async def screenshot_url(
    client: Client,
    options: Options,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> StoredScreenshot:
    opts = as_options(options)
    opts["store"] = True
    return await screenshot(client, opts, http_client=http_client)


async def screenshot_bytes(
    client: Client,
    options: Options,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> bytes:
    return await screenshot_or_throw_bytes(client, options, http_client=http_client)


async def save_screenshot(
    client: Client,
    options: Options,
    path: PathT,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> PathT:
    """Take a screenshot and write it to ``path``. The write runs in a worker thread."""
    image = await screenshot_bytes(client, options, http_client=http_client)
    return await asyncio.to_thread(write_image, path, image)
