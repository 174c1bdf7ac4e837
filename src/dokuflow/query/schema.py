"""Query – runtime field model of a document type.

Python cannot restrict a ``str`` parameter to the keys of a ``TypedDict`` or
dataclass, so a model client built with a document type checks its query
options against a :class:`DocumentSchema` before compiling them.
"""
from __future__ import annotations

import dataclasses
from typing import Any, get_origin, get_type_hints

from dokuflow.kernel.errors import ValidationError
from dokuflow.query.types import QueryOptions


def _matches(value: Any, hint: type) -> bool:
    if value is None:
        return True
    if hint is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if hint is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, hint)


@dataclasses.dataclass(frozen=True)
class DocumentSchema:
    """Field name to declared type, ``ID`` included."""

    name: str
    fields: dict[str, Any]

    @classmethod
    def of(cls, document_type: type) -> "DocumentSchema":
        hints = dict(get_type_hints(document_type))
        hints.setdefault("ID", str)
        return cls(name=document_type.__name__, fields=hints)

    def __contains__(self, field: str) -> bool:
        return field in self.fields

    def check(self, options: QueryOptions[Any]) -> None:
        """Raise :class:`ValidationError` listing every bad field in *options*."""
        errors: list[dict[str, Any]] = []

        def unknown(clause: str, field: str) -> None:
            errors.append({"clause": clause, "field": field, "reason": f"not a field of {self.name}"})

        for f in options.filters or ():
            if f.field not in self.fields:
                unknown("filters", f.field)
                continue
            hint = self.fields[f.field]
            # only plain classes are checked; list[str], Optional[...] and the like pass
            if not isinstance(hint, type) or get_origin(hint) is not None:
                continue
            values = f.value if f.operation == "IN" else [f.value]
            for value in values:
                if not _matches(value, hint):
                    errors.append({
                        "clause": "filters",
                        "field": f.field,
                        "reason": f"expected {hint.__name__}, got {type(value).__name__}",
                    })
                    break

        for name in options.selections or ():
            if name not in self.fields:
                unknown("select", name)

        for name in options.relations or ():
            if name not in self.fields:
                unknown("relations", name)

        if options.sort_by is not None and options.sort_by.field not in self.fields:
            unknown("sort", options.sort_by.field)

        if errors:
            raise ValidationError(f"Invalid query options for {self.name}", errors=errors)


__all__ = ["DocumentSchema"]
