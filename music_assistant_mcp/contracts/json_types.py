"""Canonical type definitions for JSON data.

Use ``JSONValue`` / ``JSONObject`` only when the shape is genuinely unknown
(e.g. tool arguments before validation, or an arbitrary backend payload).
For every known structure, use the named TypedDicts in
``music_assistant_mcp.contracts.music_types`` or
``music_assistant_mcp.contracts.mcp_types``.

## Conversion helpers

- ``jint(v)`` / ``jfloat(v)`` - safe numeric extraction from ``JSONValue``.
"""

from __future__ import annotations

JSONScalar = str | int | float | bool | None
"""A JSON leaf value with no recursive structure."""

JSONValue = str | int | float | bool | None | list["JSONValue"] | dict[str, "JSONValue"]
"""Recursive JSON value - the most precise mypy-safe alternative to ``Any``.

Use ``isinstance`` guards, ``jint()`` or ``jfloat()`` to narrow ``JSONValue``
before dereferencing fields.
"""

JSONObject = dict[str, JSONValue]
"""A JSON object with unknown key set (tool arguments, backend command args)."""


def jfloat(v: JSONValue, default: float = 0.0) -> float:
    """Safely extract a ``float`` from a ``JSONValue``.

    Returns *default* when *v* is not numeric::

        position = jfloat(arguments.get("position"))   # 0.0 if absent
    """
    if isinstance(v, bool):
        return default
    return float(v) if isinstance(v, (int, float)) else default


def jint(v: JSONValue, default: int = 0) -> int:
    """Safely extract an ``int`` from a ``JSONValue``.

    Returns *default* when *v* is not numeric::

        offset = jint(arguments.get("offset"))    # 0 if absent
    """
    if isinstance(v, bool):
        return default
    return int(v) if isinstance(v, (int, float)) else default
