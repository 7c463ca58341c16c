"""Domain errors — flag contract violations."""

from __future__ import annotations

from typing import Any

from flagkit.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a flag rule / invariant is violated."""

    default_code = "domain_error"


class NotFoundError(DomainError):
    """The requested resource does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class UnknownFlagError(NotFoundError):
    """A flag name was used that the catalog does not define.

    This is a programmer error: callers must only ask for flags that exist.
    """

    default_code = "unknown_flag"

    def __init__(self, name: str, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"flag": name})
        super().__init__("Feature flag", name, **kwargs)
        self.name = name


class UnsupportedStorageError(DomainError):
    """An override write was attempted on a flag without a storage medium."""

    default_code = "unsupported_storage"

    def __init__(self, name: str, storage: str = "none", **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"flag": name, "storage": storage})
        super().__init__(
            f"Feature flag '{name}' has storage '{storage}' and cannot hold an override",
            **kwargs,
        )
        self.name = name
        self.storage = storage


__all__ = [
    "DomainError",
    "NotFoundError",
    "UnknownFlagError",
    "UnsupportedStorageError",
]
