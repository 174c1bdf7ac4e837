"""Client – DokuflowModelClient, CRUD and list queries over one model."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

import httpx

from dokuflow.adapters.http import HttpxHttpClient
from dokuflow.observability.logging import SensitiveFieldsFilter, get_logger
from dokuflow.query.compiler import compile_query
from dokuflow.query.schema import DocumentSchema
from dokuflow.query.types import ListOptions, Pagination, QueryOptions

D = TypeVar("D")

logger = get_logger(__name__)


def _as_payload(document: Any) -> dict[str, Any]:
    if dataclasses.is_dataclass(document) and not isinstance(document, type):
        return dataclasses.asdict(document)
    return dict(document)


class DokuflowModelClient(Generic[D]):
    """Talks to ``<base_url>/<space>/<model>`` on behalf of one model.

    When built with a *document_type* (a ``TypedDict`` or dataclass) the
    field names and filter values of every list query are checked against
    it before the query is compiled.
    """

    def __init__(
        self,
        http: HttpxHttpClient,
        base_url: str,
        api_key: str,
        document_type: type[D] | None = None,
    ) -> None:
        self._http = http
        self._base_url = base_url
        self._api_key = api_key
        self._schema = DocumentSchema.of(document_type) if document_type is not None else None

    @property
    def schema(self) -> DocumentSchema | None:
        return self._schema

    def get_base_url(self, document_id: str | None = None) -> str:
        if document_id:
            return f"{self._base_url}/{document_id}?apiKey={self._api_key}"
        return f"{self._base_url}?apiKey={self._api_key}"

    def build_list_url(self, options: ListOptions[D] | None = None) -> str:
        """Compile *options* onto the model's base URL without sending anything."""
        if options is not None and self._schema is not None:
            self._schema.check(options)
        return compile_query(self.get_base_url(), options)

    async def get(self, document_id: str) -> httpx.Response:
        return await self._send("GET", self.get_base_url(document_id))

    async def get_list(self, options: ListOptions[D] | None = None) -> httpx.Response:
        return await self._send("GET", self.build_list_url(options))

    async def get_first(self, options: QueryOptions[D] | None = None) -> Any:
        """Return the first document matching *options*, or ``None``.

        Pagination is always replaced with ``take=1``.
        """
        list_options = ListOptions.from_query(options or QueryOptions(), Pagination(take=1))
        response = await self.get_list(list_options)
        data = response.json()
        if isinstance(data, list) and len(data) < 1:
            return None
        return data[0]

    async def create(self, document: Mapping[str, Any]) -> httpx.Response:
        return await self._send("POST", self.get_base_url(), json=_as_payload(document))

    async def update(self, document: Mapping[str, Any]) -> httpx.Response:
        """PATCH every field but ``ID`` to the document named by ``ID``."""
        payload = _as_payload(document)
        document_id = payload.pop("ID")
        return await self._send("PATCH", self.get_base_url(document_id), json=payload)

    async def delete(self, document_id: str) -> httpx.Response:
        return await self._send("DELETE", self.get_base_url(document_id))

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        logger.debug("dokuflow.request", method=method, url=SensitiveFieldsFilter.redact_url(url))
        return await getattr(self._http, method.lower())(url, **kwargs)


__all__ = ["DokuflowModelClient"]
