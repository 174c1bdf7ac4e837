"""Config settings – Settings base class and DokuflowSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from dokuflow.config.validation import InvalidSettingValueError

DEFAULT_BASE_URL = "https://lax.dokuflow.com"


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class DokuflowSettings(Settings):
    """Connection settings for one Dokuflow space.

    Loaded from ``DOKUFLOW_*`` environment variables by
    :class:`~dokuflow.config.settings.loaders.EnvSettingsLoader`::

        DOKUFLOW_SPACE_NAME=acme
        DOKUFLOW_API_KEY=...
        DOKUFLOW_TIMEOUT=5
    """

    _prefix: ClassVar[str] = "DOKUFLOW"

    space_name: str
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not self.space_name:
            raise InvalidSettingValueError("space_name", self.space_name, "must not be empty")
        if not self.api_key:
            raise InvalidSettingValueError("api_key", self.api_key, "must not be empty")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")
        if logging.getLevelName(self.log_level.upper()) not in (
            logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL,
        ):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")
        self.base_url = self.base_url.rstrip("/")

    @property
    def level(self) -> int:
        """``log_level`` as a :mod:`logging` constant."""
        return logging.getLevelName(self.log_level.upper())


__all__ = ["DEFAULT_BASE_URL", "DokuflowSettings", "Settings"]
