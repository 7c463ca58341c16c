"""Config validation errors."""
from __future__ import annotations

from typing import Any

from flagkit.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class CatalogError(ConfigError):
    """The flag definitions source is malformed."""
    default_code = "catalog_error"

    def __init__(self, message: str, *, flag: str | None = None, **kwargs: Any) -> None:
        if flag is not None:
            kwargs.setdefault("detail", {"flag": flag})
        super().__init__(message, **kwargs)
        self.flag = flag


__all__ = [
    "CatalogError",
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
