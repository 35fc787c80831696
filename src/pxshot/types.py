"""Type definitions for pxshot."""

from __future__ import annotations

from typing import Any, Literal, Mapping, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Options forwarded to POST /v1/screenshot. Anything else is dropped.
SCREENSHOT_PARAMS = frozenset(
    {
        "url",
        "format",
        "quality",
        "width",
        "height",
        "fullPage",
        "waitUntil",
        "waitForSelector",
        "waitForTimeout",
        "deviceScaleFactor",
        "store",
        "blockAds",
    }
)

# Accepted spellings that map onto a known option.
OPTION_ALIASES = {"waitForTimeoutMs": "waitForTimeout"}

StoredScreenshot = dict[str, Any]
UsageStats = dict[str, Any]
ScreenshotResult = Union[bytes, StoredScreenshot]


class ScreenshotOptions(BaseModel):
    """Validated screenshot options.

    Plain mappings with camelCase keys are accepted everywhere this model is;
    the model only adds local validation. Unset fields are not sent, so the
    server-side defaults apply.

    Attributes:
        url: Page to capture (required)
        format: "png", "jpeg" or "webp" (server default: png)
        quality: JPEG/WebP quality 1-100 (server default: 80)
        width: Viewport width in pixels (server default: 1920)
        height: Viewport height in pixels (server default: 1080)
        full_page: Capture the full scrollable page (server default: False)
        wait_until: "load", "domcontentloaded" or "networkidle"
        wait_for_selector: CSS selector to wait for before capture
        wait_for_timeout: Extra wait in milliseconds after page load
                          (also accepted as "waitForTimeoutMs")
        device_scale_factor: Device scale factor, e.g. 2 for retina (server default: 1)
        store: Store the image and return its URL instead of the bytes
        block_ads: Block ads and trackers (server default: False)

    Examples:
        opts = ScreenshotOptions(url="https://example.com", full_page=True)
        opts.to_options()  # {"url": "https://example.com", "fullPage": True}
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    url: str = Field(min_length=1)
    format: Optional[Literal["png", "jpeg", "webp"]] = None
    quality: Optional[int] = Field(default=None, ge=1, le=100)
    width: Optional[int] = Field(default=None, gt=0)
    height: Optional[int] = Field(default=None, gt=0)
    full_page: Optional[bool] = None
    wait_until: Optional[Literal["load", "domcontentloaded", "networkidle"]] = None
    wait_for_selector: Optional[str] = None
    wait_for_timeout: Optional[int] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("waitForTimeout", "waitForTimeoutMs", "wait_for_timeout"),
    )
    device_scale_factor: Optional[float] = Field(default=None, gt=0)
    store: Optional[bool] = None
    block_ads: Optional[bool] = None

    def to_options(self) -> dict[str, Any]:
        """Return the set fields as a camelCase options dict."""
        return self.model_dump(by_alias=True, exclude_none=True)


def as_options(options: Union[ScreenshotOptions, Mapping[str, Any]]) -> dict[str, Any]:
    """Return a fresh options dict with aliases resolved.

    The caller's mapping is never modified. When both an alias and its
    canonical key are given, the canonical key wins.
    """
    if isinstance(options, ScreenshotOptions):
        return options.to_options()
    opts = dict(options)
    for alias, key in OPTION_ALIASES.items():
        if alias in opts:
            value = opts.pop(alias)
            opts.setdefault(key, value)
    return opts
