"""JSON encoding of component maps, accelerated by orjson when installed."""

from __future__ import annotations

try:
    import orjson  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    orjson = None  # type: ignore[assignment]

import json


def json_dumps(data: object, indent: bool = False) -> str:
    """Encode a component map (or a list of them) as JSON text.

    Non-ASCII characters such as the ``§`` marker are written as is.

    Args:
        data: Map projection or flat list of map projections.
        indent: Use two-space indentation for human readers.

    Returns:
        The JSON text.
    """

    if orjson is not None:
        option = orjson.OPT_INDENT_2 if indent else 0
        return orjson.dumps(data, option=option).decode()
    return json.dumps(data, ensure_ascii=False, indent=2 if indent else None)


def json_loads(data: str | bytes) -> object:
    """Decode the JSON text of a component file.

    Args:
        data: File content, either decoded or raw UTF-8 bytes.

    Returns:
        The decoded value, usually a component map.
    """

    if orjson is not None:
        return orjson.loads(data)
    if isinstance(data, (bytes, bytearray)):
        return json.loads(data.decode())
    return json.loads(data)
