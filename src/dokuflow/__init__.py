"""
dokuflow – typed async client for the Dokuflow document-store API.

Import path convention::

    from dokuflow import DokuflowClient
    from dokuflow.query import Filter, ListOptions, Pagination, Sort, SortBy
    from dokuflow.kernel.errors import ExternalServiceError
"""

from dokuflow.client import DokuflowClient, DokuflowModelClient
from dokuflow.config import DokuflowSettings
from dokuflow.query import (
    Filter,
    ListOptions,
    MutationResponse,
    Pagination,
    QueryOptions,
    Sort,
    SortBy,
)

__version__ = "0.1.0"
__all__ = [
    "DokuflowClient",
    "DokuflowModelClient",
    "DokuflowSettings",
    "Filter",
    "ListOptions",
    "MutationResponse",
    "Pagination",
    "QueryOptions",
    "Sort",
    "SortBy",
    "__version__",
]
