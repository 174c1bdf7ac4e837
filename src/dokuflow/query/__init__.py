"""Query – typed list-query options and their query-string compiler."""
from dokuflow.query.compiler import compile_query, compile_query_string
from dokuflow.query.filters import compile_filter, compile_filters, render_value
from dokuflow.query.schema import DocumentSchema
from dokuflow.query.types import (
    OPERATIONS,
    Filter,
    ListOptions,
    MutationResponse,
    Operation,
    Pagination,
    QueryOptions,
    Sort,
    SortBy,
)

__all__ = [
    "DocumentSchema",
    "Filter",
    "ListOptions",
    "MutationResponse",
    "OPERATIONS",
    "Operation",
    "Pagination",
    "QueryOptions",
    "Sort",
    "SortBy",
    "compile_filter",
    "compile_filters",
    "compile_query",
    "compile_query_string",
    "render_value",
]
