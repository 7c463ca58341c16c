"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── NotFoundError
    │   │   └── UnknownFlagError
    │   └── UnsupportedStorageError
    └── ApplicationError         (application.py)
        └── ConfigError          (flagkit.config.validation)
            └── CatalogError
"""

from flagkit.kernel.errors.application import ApplicationError
from flagkit.kernel.errors.base import BaseError
from flagkit.kernel.errors.domain import (
    DomainError,
    NotFoundError,
    UnknownFlagError,
    UnsupportedStorageError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "NotFoundError",
    "UnknownFlagError",
    "UnsupportedStorageError",
]
