"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Subclasses set ``_prefix``; each field is read from ``<PREFIX>_<FIELD>``.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    def to_dict(self) -> dict[str, Any]:
        """Field values keyed by their environment variable names."""
        prefix = self._prefix.upper()
        return {
            f"{prefix}_{field.name}".upper().lstrip("_"): getattr(self, field.name)
            for field in dataclasses.fields(self)
        }


__all__ = ["Settings"]
