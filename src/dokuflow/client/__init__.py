"""Client – space and per-model Dokuflow clients."""
from dokuflow.client.model import DokuflowModelClient
from dokuflow.client.space import DokuflowClient

__all__ = ["DokuflowClient", "DokuflowModelClient"]
