"""HTTP adapter – async HTTP transport for the Dokuflow API."""
from dokuflow.adapters.http.client import HttpxHttpClient

__all__ = ["HttpxHttpClient"]
