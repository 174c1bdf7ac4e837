"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from dokuflow.kernel.errors import ExternalServiceError, TimeoutError as AppTimeoutError
from dokuflow.observability.logging import SensitiveFieldsFilter, get_logger

logger = get_logger(__name__)


class HttpxHttpClient:
    """Thin async httpx wrapper with structured error mapping.

    Callers pass absolute URLs, sent as given; error messages and log
    events carry them with the ``apiKey`` masked.
    """

    def __init__(self, timeout: float = 10.0, **kwargs: Any) -> None:
        self._client = httpx.AsyncClient(timeout=timeout, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("POST", url, **kwargs)

    async def patch(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("PATCH", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("DELETE", url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        safe_url = SensitiveFieldsFilter.redact_url(url)
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.TimeoutException as exc:
            logger.warning("dokuflow.http_timeout", method=method, url=safe_url)
            raise AppTimeoutError(f"HTTP request timed out: {method} {safe_url}") from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("dokuflow.http_error", method=method, url=safe_url, status_code=status)
            raise ExternalServiceError(
                service=safe_url,
                message=f"HTTP {status} from {method} {safe_url}",
                status_code=status,
                detail={"method": method, "status_code": status},
            ) from exc
        except httpx.HTTPError as exc:
            error = SensitiveFieldsFilter.redact_url(str(exc))
            logger.warning("dokuflow.http_error", method=method, url=safe_url, error=error)
            raise ExternalServiceError(service=safe_url, message=error, detail={"method": method}) from exc


__all__ = ["HttpxHttpClient"]
