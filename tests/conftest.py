from __future__ import annotations

import json
from typing import Any, Callable, Iterator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

import pxshot

PNG_BYTES = b"\x89PNG\r\n\x1a\nFAKEPNG\x00\xff"
API_KEY = "px_test_key"


class RecordingHandler:
    """MockTransport handler that records every request it answers."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]) -> None:
        self._respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    @property
    def last_json(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


class FakePxshotService:
    """In-process stand-in for the Pxshot API."""

    def __init__(
        self,
        *,
        image: bytes = PNG_BYTES,
        usage: dict[str, Any] | None = None,
    ) -> None:
        self.image = image
        self.usage = usage or {"screenshots_today": 42, "screenshots_month": 1337, "plan": "pro"}
        self.bodies: list[dict[str, Any]] = []
        self.app = FastAPI()

        def authorized(request: Request) -> bool:
            return request.headers.get("authorization") == f"Bearer {API_KEY}"

        def forbidden() -> JSONResponse:
            return JSONResponse(status_code=403, content={"error": {"message": "invalid key"}})

        @self.app.post("/v1/screenshot")
        async def screenshot(request: Request):
            if not authorized(request):
                return forbidden()
            body = await request.json()
            self.bodies.append(body)
            if body.get("url") == "https://broken.example":
                return PlainTextResponse("upstream exploded", status_code=500)
            if body.get("store"):
                return {
                    "url": "https://storage.pxshot.com/abc.png",
                    "expires_at": "2026-10-20T00:00:00Z",
                    "width": body.get("width", 1920),
                    "height": body.get("height", 1080),
                    "size_bytes": len(self.image),
                }
            return Response(content=self.image, media_type="image/png")

        @self.app.get("/v1/usage")
        async def usage(request: Request):
            if not authorized(request):
                return forbidden()
            return self.usage


@pytest.fixture
def pxshot_client() -> pxshot.Client:
    return pxshot.client(API_KEY)


@pytest.fixture
def mock_http() -> Iterator[Callable[..., tuple[httpx.Client, RecordingHandler]]]:
    """Factory for httpx.Client instances backed by a recording MockTransport."""
    clients: list[httpx.Client] = []

    def factory(respond: Callable[[httpx.Request], httpx.Response]):
        handler = RecordingHandler(respond)
        http = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(http)
        return http, handler

    yield factory
    for http in clients:
        http.close()


@pytest.fixture
def fake_service() -> FakePxshotService:
    return FakePxshotService()


@pytest_asyncio.fixture
async def async_http(fake_service: FakePxshotService):
    transport = httpx.ASGITransport(app=fake_service.app)
    async with httpx.AsyncClient(transport=transport) as ac:
        yield ac
