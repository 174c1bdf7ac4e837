"""Config validation errors."""
from dokuflow.kernel.errors import ApplicationError
from dokuflow.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter


class ConfigError(ApplicationError):
    """Raised when client configuration is invalid or loading failed."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required ``DOKUFLOW_*`` variable is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but unusable.

    Values of sensitive settings (``api_key`` and friends) never reach the
    message or ``value``; they are replaced with ``[REDACTED]``.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        if setting_name.lower() in DEFAULT_SENSITIVE_FIELDS:
            value = SensitiveFieldsFilter.REDACTED
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
