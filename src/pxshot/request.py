"""Request building and response decoding shared by the sync and async APIs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

import httpx

from .config import Client
from .errors import ApiError, raise_for_error
from .keys import from_wire, to_wire, transform_keys
from .types import SCREENSHOT_PARAMS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreparedRequest:
    """A fully built API request.

    Attributes:
        method: HTTP method
        url: Absolute request URL
        headers: Request headers, including authorization
        json: Request body with wire-case keys, or None
        as_json: Decode a successful response as JSON (True) or return raw bytes (False)
    """

    method: str
    url: str
    headers: dict[str, str]
    json: Optional[dict[str, Any]]
    as_json: bool


def build_headers(client: Client) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {client.api_key}",
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


def _endpoint(client: Client, path: str) -> str:
    return f"{client.base_url.rstrip('/')}{path}"


def build_screenshot_request(client: Client, options: dict[str, Any]) -> PreparedRequest:
    """POST /v1/screenshot. The decode mode follows the caller's ``store`` flag."""
    body = transform_keys(
        to_wire,
        {k: v for k, v in options.items() if k in SCREENSHOT_PARAMS},
    )
    return PreparedRequest(
        method="POST",
        url=_endpoint(client, "/v1/screenshot"),
        headers=build_headers(client),
        json=body,
        as_json=bool(options.get("store")),
    )


def build_usage_request(client: Client) -> PreparedRequest:
    """GET /v1/usage."""
    return PreparedRequest(
        method="GET",
        url=_endpoint(client, "/v1/usage"),
        headers=build_headers(client),
        json=None,
        as_json=True,
    )


def _json_object(response: httpx.Response) -> dict[str, Any]:
    status = response.status_code
    try:
        body = response.json()
    except ValueError:
        raise ApiError(status, f"Invalid JSON response (status {status})", response.text) from None
    if not isinstance(body, dict):
        raise ApiError(status, f"Expected a JSON object (status {status})", body)
    return body


def read_response(prepared: PreparedRequest, response: httpx.Response) -> Union[bytes, dict[str, Any]]:
    """Decode a response in the mode chosen when the request was built.

    Raises:
        ApiError: If the status is outside 200-299, or a JSON reply is not a
                  JSON object
    """
    logger.debug(
        f"{prepared.method} {prepared.url} -> {response.status_code} ({len(response.content)} bytes)"
    )
    if not 200 <= response.status_code <= 299:
        raise_for_error(response)
    if prepared.as_json:
        return transform_keys(from_wire, _json_object(response))
    return response.content
