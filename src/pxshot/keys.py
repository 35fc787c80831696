"""Key-case conversion between the SDK's camelCase keys and the API's snake_case keys."""

from __future__ import annotations

import re
from typing import Any, Callable, Mapping

_UPPER = re.compile(r"([A-Z])")


def to_wire(key: str) -> str:
    """camelCase -> snake_case (``"waitForSelector"`` -> ``"wait_for_selector"``)."""
    return _UPPER.sub(r"_\1", key).lower()


def from_wire(key: str) -> str:
    """snake_case -> camelCase (``"full_page"`` -> ``"fullPage"``).

    Segments that do not start with a letter keep their underscore
    (``"last_30_days"`` -> ``"last_30Days"``) so ``to_wire`` can restore them.
    """
    head, *rest = key.split("_")
    parts = [head]
    for part in rest:
        if part[:1].isalpha():
            parts.append(part[:1].upper() + part[1:])
        else:
            parts.append("_" + part)
    return "".join(parts)


def transform_keys(fn: Callable[[str], str], mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Apply ``fn`` to the top-level keys of ``mapping``. Values are left as-is."""
    return {fn(k): v for k, v in mapping.items()}
