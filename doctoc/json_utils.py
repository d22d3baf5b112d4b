"""JSON serialization helpers using optional orjson."""

from __future__ import annotations

try:
    import orjson  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    orjson = None  # type: ignore[assignment]

import json
from typing import Any


class KeyValuePairs(list):
    """Ordered ``(key, value)`` pairs of a decoded mapping.

    Unlike a ``dict`` this keeps repeated keys, so that callers can detect
    duplicates that the decoder would otherwise silently collapse.
    """

    def __repr__(self) -> str:
        return f"KeyValuePairs({list.__repr__(self)})"


def json_dumps(data: object, indent: int | None = None) -> str:
    """Serialize data to a JSON string.

    Args:
        data: Data structure to serialize.
        indent: Pretty-print with two spaces when set; orjson only supports
            that width, so any non-``None`` value is treated alike there.

    Returns:
        JSON representation of ``data``.
    """

    if orjson is not None:
        option = orjson.OPT_INDENT_2 if indent is not None else 0
        return orjson.dumps(data, option=option).decode()
    return json.dumps(data, ensure_ascii=False, indent=indent)


def json_loads_pairs(data: str | bytes) -> Any:
    """Deserialize JSON keeping every object as ``KeyValuePairs``.

    Args:
        data: JSON content as ``str`` or UTF-8 ``bytes``.

    Returns:
        Parsed JSON value where objects are ordered pair lists.

    Throws:
        ValueError: If ``data`` is not valid JSON.
    """

    if isinstance(data, (bytes, bytearray)):
        data = data.decode("utf-8-sig")
    return json.loads(data, object_pairs_hook=KeyValuePairs)
