"""Query – option value objects for list queries and mutation envelopes."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Generic, Literal, TypeVar

from dokuflow.kernel.errors import ValidationError

D = TypeVar("D")

Operation = Literal["LIKE", "EQ", "IN"]
OPERATIONS: tuple[str, ...] = ("LIKE", "EQ", "IN")


@dataclasses.dataclass(frozen=True)
class Filter:
    """A single server-side predicate ``field <operation> value``.

    ``IN`` takes an ordered list of values, ``LIKE`` and ``EQ`` a single one.
    """

    field: str
    operation: Operation
    value: Any

    def __post_init__(self) -> None:
        if self.operation not in OPERATIONS:
            raise ValidationError(
                f"Unknown filter operation {self.operation!r}",
                errors=[{"field": self.field, "reason": f"operation must be one of {', '.join(OPERATIONS)}"}],
            )
        is_list = isinstance(self.value, (list, tuple))
        if self.operation == "IN" and not is_list:
            raise ValidationError(
                f"IN filter on '{self.field}' needs a list of values",
                errors=[{"field": self.field, "reason": "IN expects a list of values"}],
            )
        if self.operation != "IN" and is_list:
            raise ValidationError(
                f"{self.operation} filter on '{self.field}' needs a single value",
                errors=[{"field": self.field, "reason": f"{self.operation} expects a single value"}],
            )

    @classmethod
    def like(cls, field: str, value: Any) -> "Filter":
        return cls(field, "LIKE", value)

    @classmethod
    def eq(cls, field: str, value: Any) -> "Filter":
        return cls(field, "EQ", value)

    @classmethod
    def in_(cls, field: str, values: Sequence[Any]) -> "Filter":
        return cls(field, "IN", list(values))


@dataclasses.dataclass(frozen=True)
class Pagination:
    skip: int | None = None
    take: int | None = None


class Sort(str, Enum):
    """Coarse, server-defined orderings."""

    EARLIEST_FIRST = "earliest_first"
    LATEST_FIRST = "latest_first"


@dataclasses.dataclass(frozen=True)
class SortBy:
    """Order by one field, ascending unless ``desc`` is set."""

    field: str
    desc: bool = False


@dataclasses.dataclass(frozen=True)
class QueryOptions(Generic[D]):
    """List-query options without pagination (the input of ``get_first``)."""

    selections: Sequence[str] | None = None
    filters: Sequence[Filter] | None = None
    relations: Sequence[str] | None = None
    sort: Sort | None = None
    sort_by: SortBy | None = None


@dataclasses.dataclass(frozen=True)
class ListOptions(QueryOptions[D]):
    """Full list-query options (the input of ``get_list``)."""

    pagination: Pagination | None = None

    @classmethod
    def from_query(cls, options: QueryOptions[D], pagination: Pagination | None) -> "ListOptions[D]":
        """Copy every query option of *options* and set *pagination*."""
        values = {f.name: getattr(options, f.name) for f in dataclasses.fields(QueryOptions)}
        return cls(**values, pagination=pagination)


@dataclasses.dataclass(frozen=True)
class MutationResponse(Generic[D]):
    """Envelope returned by create, update and delete."""

    is_success: bool
    message: str
    result: D | None = None
    validation_result: dict[str, str] | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "MutationResponse[D]":
        return cls(
            is_success=bool(payload.get("isSuccess")),
            message=payload.get("message") or "",
            result=payload.get("result"),
            validation_result=payload.get("validationResult"),
        )


__all__ = [
    "Filter",
    "ListOptions",
    "MutationResponse",
    "OPERATIONS",
    "Operation",
    "Pagination",
    "QueryOptions",
    "Sort",
    "SortBy",
]
