"""Query – list-query compiler.

Clauses are appended to the base URL in a fixed order::

    filters, select, skip, take, relations, sort (preset), sort (field)

The base URL already carries ``?apiKey=...`` so every clause starts with
``&``. Each clause has its own presence rule: empty ``filters`` and
``selections`` are dropped while an empty ``relations`` list still emits
``&relations=``. A preset ``sort`` and a ``sort_by`` given together produce
two ``sort=`` parameters.
"""
from __future__ import annotations

from typing import Any

from dokuflow.query.filters import compile_filters
from dokuflow.query.types import ListOptions, Sort


def compile_query_string(options: ListOptions[Any]) -> str:
    """Return the ``&``-prefixed clauses for *options* (empty when nothing is set)."""
    parts: list[str] = []

    if options.filters:
        parts.append("&" + "&".join(compile_filters(options.filters)))

    if options.selections:
        parts.append(f"&select={','.join(options.selections)}")

    if options.pagination is not None:
        if options.pagination.skip is not None:
            parts.append(f"&skip={options.pagination.skip}")
        if options.pagination.take is not None:
            parts.append(f"&take={options.pagination.take}")

    if options.relations is not None:
        parts.append(f"&relations={','.join(options.relations)}")

    if options.sort is not None:
        parts.append(f"&sort={Sort(options.sort).value}")

    if options.sort_by is not None:
        suffix = "||desc" if options.sort_by.desc else ""
        parts.append(f"&sort={options.sort_by.field}{suffix}")

    return "".join(parts)


def compile_query(base_url: str, options: ListOptions[Any] | None = None) -> str:
    """Append the compiled clauses of *options* to *base_url*."""
    if options is None:
        return base_url
    return base_url + compile_query_string(options)


__all__ = ["compile_query", "compile_query_string"]
