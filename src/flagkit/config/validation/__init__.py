"""Config validation errors."""
from flagkit.config.validation.errors import (
    CatalogError,
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = ["CatalogError", "ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
