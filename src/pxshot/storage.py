"""Local persistence of screenshot images."""

from __future__ import annotations

import logging
import os
from typing import TypeVar, Union

logger = logging.getLogger(__name__)

PathT = TypeVar("PathT", bound=Union[str, os.PathLike])


def write_image(path: PathT, data: bytes) -> PathT:
    """Write image bytes to ``path``, replacing any existing file.

    Returns:
        ``path``, unchanged
    """
    with open(path, "wb") as f:
        f.write(data)
    logger.debug(f"Saved {len(data)} bytes to {os.fspath(path)}")
    return path
