"""Query – filter clause compiler.

Each :class:`~dokuflow.query.types.Filter` becomes one ``$$<field>=<OP>||<value>``
fragment. ``IN`` values are joined with ``|`` and nothing is escaped, so a
value containing ``|`` reaches the server split in two.
"""
from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any

from dokuflow.query.types import Filter

IN_SEPARATOR = "|"


def render_value(value: Any) -> str:
    """Render a scalar the way the Dokuflow API expects it on the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _render_item(value: Any) -> str:
    # null list members collapse to nothing
    return "" if value is None else render_value(value)


def compile_filter(f: Filter) -> str:
    if f.operation == "IN":
        rendered = IN_SEPARATOR.join(_render_item(v) for v in f.value)
    else:
        rendered = render_value(f.value)
    return f"$${f.field}={f.operation}||{rendered}"


def compile_filters(filters: Sequence[Filter]) -> list[str]:
    return [compile_filter(f) for f in filters]


__all__ = ["IN_SEPARATOR", "compile_filter", "compile_filters", "render_value"]
