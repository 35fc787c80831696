"""Error types and mapping of failed API responses."""

from __future__ import annotations

from typing import Any, NoReturn

import httpx


class PxshotError(Exception):
    """Base class for errors raised by pxshot."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(PxshotError):
    """Required input is missing. Raised before any request is sent."""


class ApiError(PxshotError):
    """The API answered with a non-2xx status.

    Attributes:
        status_code: HTTP status code of the response
        message: Error message from the response body, or a generic one
        body: Parsed JSON body, or ``{"error": {"message": <raw text>}}``
              when the body was not valid JSON
    """

    def __init__(self, status_code: int, message: str, body: Any = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message)

    def __repr__(self) -> str:
        return f"ApiError(status_code={self.status_code}, message={self.message!r})"


def raise_for_error(response: httpx.Response) -> NoReturn:
    """Raise an ApiError describing a failed response.

    Only a non-empty string ``error.message`` of a parsed JSON body is used
    as the message. Anything else, including a body that could not be parsed, falls back to
    ``"API error: <status>"``.
    """
    status = response.status_code
    try:
        body = response.json()
    except ValueError:
        body = {"error": {"message": response.text}}
        raise ApiError(status, f"API error: {status}", body) from None

    error = body.get("error") if isinstance(body, dict) else None
    message = error.get("message") if isinstance(error, dict) else None
    if not isinstance(message, str) or not message:
        message = f"API error: {status}"
    raise ApiError(status, message, body)
