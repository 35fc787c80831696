from __future__ import annotations

import pytest

import pxshot
from pxshot import ApiError, ValidationError, aio

from .conftest import PNG_BYTES


@pytest.mark.asyncio
async def test_screenshot_bytes(pxshot_client, async_http, fake_service) -> None:
    image = await aio.screenshot(
        pxshot_client, {"url": "https://example.com", "fullPage": True}, http_client=async_http
    )
    assert image == PNG_BYTES
    assert fake_service.bodies == [{"url": "https://example.com", "full_page": True}]


@pytest.mark.asyncio
async def test_screenshot_requires_url(pxshot_client, async_http, fake_service) -> None:
    with pytest.raises(ValidationError):
        await aio.screenshot(pxshot_client, {}, http_client=async_http)
    assert fake_service.bodies == []


@pytest.mark.asyncio
async def test_screenshot_url(pxshot_client, async_http, fake_service) -> None:
    result = await aio.screenshot_url(
        pxshot_client, {"url": "https://example.com", "width": 800}, http_client=async_http
    )
    assert result == {
        "url": "https://storage.pxshot.com/abc.png",
        "expiresAt": "2026-10-20T00:00:00Z",
        "width": 800,
        "height": 1080,
        "sizeBytes": len(PNG_BYTES),
    }
    assert fake_service.bodies[0]["store"] is True


@pytest.mark.asyncio
async def test_screenshot_or_throw_bytes_ignores_store(pxshot_client, async_http, fake_service) -> None:
    image = await aio.screenshot_or_throw_bytes(
        pxshot_client, {"url": "https://example.com", "store": True}, http_client=async_http
    )
    assert image == PNG_BYTES
    assert "store" not in fake_service.bodies[0]


@pytest.mark.asyncio
async def test_screenshot_bytes_ignores_store(pxshot_client, async_http, fake_service) -> None:
    image = await aio.screenshot_bytes(
        pxshot_client, {"url": "https://example.com", "store": True}, http_client=async_http
    )
    assert image == PNG_BYTES
    assert fake_service.bodies == [{"url": "https://example.com"}]


@pytest.mark.asyncio
async def test_usage(pxshot_client, async_http) -> None:
    stats = await aio.usage(pxshot_client, http_client=async_http)
    assert stats == {"screenshotsToday": 42, "screenshotsMonth": 1337, "plan": "pro"}


@pytest.mark.asyncio
async def test_invalid_key(async_http) -> None:
    c = pxshot.client("px_wrong")
    with pytest.raises(ApiError) as exc:
        await aio.usage(c, http_client=async_http)
    assert exc.value.status_code == 403
    assert exc.value.message == "invalid key"


@pytest.mark.asyncio
async def test_plain_text_server_error(pxshot_client, async_http) -> None:
    with pytest.raises(ApiError) as exc:
        await aio.screenshot(pxshot_client, {"url": "https://broken.example"}, http_client=async_http)
    assert exc.value.status_code == 500
    assert "500" in exc.value.message
    assert exc.value.body == {"error": {"message": "upstream exploded"}}


@pytest.mark.asyncio
async def test_save_screenshot(pxshot_client, async_http, tmp_path) -> None:
    path = tmp_path / "shot.png"
    returned = await aio.save_screenshot(
        pxshot_client, {"url": "https://example.com"}, path, http_client=async_http
    )
    assert returned == path
    assert path.read_bytes() == PNG_BYTES
