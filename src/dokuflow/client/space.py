"""Client – DokuflowClient, entry point for one Dokuflow space."""
from __future__ import annotations

from typing import Any, TypeVar

from dokuflow.adapters.http import HttpxHttpClient
from dokuflow.client.model import DokuflowModelClient
from dokuflow.config.settings import DokuflowSettings, EnvSettingsLoader, SettingsLoader
from dokuflow.observability.logging import JsonLoggerFactory

D = TypeVar("D")


class DokuflowClient:
    """Hands out :class:`DokuflowModelClient` instances sharing one transport.

    Usage::

        async with DokuflowClient(DokuflowSettings(space_name="acme", api_key=key)) as dokuflow:
            tasks = dokuflow.model("tasks", Task)
            first = await tasks.get_first(QueryOptions(sort=Sort.LATEST_FIRST))
    """

    def __init__(self, settings: DokuflowSettings, http: HttpxHttpClient | None = None) -> None:
        self.settings = settings
        self._http = http or HttpxHttpClient(timeout=settings.timeout)

    @classmethod
    def from_env(
        cls,
        loader: SettingsLoader | None = None,
        *,
        configure_logging: bool = True,
    ) -> "DokuflowClient":
        """Build a client from ``DOKUFLOW_*`` environment variables.

        Unless *configure_logging* is false, JSON logging is installed at
        ``DOKUFLOW_LOG_LEVEL``.
        """
        settings = (loader or EnvSettingsLoader()).load(DokuflowSettings)
        if configure_logging:
            JsonLoggerFactory.configure(level=settings.level)
        return cls(settings)

    async def __aenter__(self) -> "DokuflowClient":
        await self._http.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._http.__aexit__(*args)

    async def aclose(self) -> None:
        await self._http.aclose()

    def model(self, model_id: str, document_type: type[D] | None = None) -> DokuflowModelClient[D]:
        return DokuflowModelClient(
            self._http,
            base_url=f"{self.settings.base_url}/{self.settings.space_name}/{model_id}",
            api_key=self.settings.api_key,
            document_type=document_type,
        )


__all__ = ["DokuflowClient"]
