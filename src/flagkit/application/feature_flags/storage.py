"""Application feature flags – override storage and lookup adapters.

Persisted overrides live in a :class:`StorageBackend` (cookie jar, local
store, memory...), one per :class:`Storage` medium.  :class:`OverrideStore`
scopes backend keys to flag names.  Query-string overrides are read through
:class:`QueryOverrides` and are never written anywhere.
"""
from __future__ import annotations

from typing import Mapping, Protocol, Sequence, runtime_checkable

from flagkit.application.feature_flags.catalog import FlagCatalog
from flagkit.application.feature_flags.constants import Storage

DEFAULT_KEY_PREFIX = "ff_"


@runtime_checkable
class StorageBackend(Protocol):
    """Capability every storage medium must expose."""

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def remove(self, key: str) -> None: ...


@runtime_checkable
class OverrideLookup(Protocol):
    """Read-only view of the override layers for one resolution call."""

    def get_persisted(self, name: str) -> str | None: ...
    def get_query(self, name: str) -> str | None: ...


class OverrideStore:
    """Per-flag override values on top of one :class:`StorageBackend`."""

    def __init__(self, backend: StorageBackend, *, key_prefix: str = DEFAULT_KEY_PREFIX) -> None:
        self._backend = backend
        self._key_prefix = key_prefix

    def key_for(self, name: str) -> str:
        return f"{self._key_prefix}{name}"

    def get(self, name: str) -> str | None:
        return self._backend.get(self.key_for(name))

    def set(self, name: str, value: str) -> None:
        self._backend.set(self.key_for(name), value)

    def remove(self, name: str) -> None:
        self._backend.remove(self.key_for(name))


class QueryOverrides:
    """One-shot overrides read from request query parameters (``ff_<name>=on``).

    *params* maps parameter names to a value or a sequence of values (as
    produced by ``urllib.parse.parse_qs``); the last value wins.
    """

    def __init__(
        self,
        params: Mapping[str, str | Sequence[str]] | None = None,
        *,
        prefix: str = DEFAULT_KEY_PREFIX,
    ) -> None:
        self._params = dict(params or {})
        self._prefix = prefix

    def get(self, name: str) -> str | None:
        value = self._params.get(f"{self._prefix}{name}")
        if value is None or isinstance(value, str):
            return value
        return value[-1] if value else None


class CatalogOverrideLookup:
    """Live :class:`OverrideLookup` routing each flag to its storage medium."""

    def __init__(
        self,
        catalog: FlagCatalog,
        stores: Mapping[Storage, OverrideStore],
        query: QueryOverrides | None = None,
    ) -> None:
        self._catalog = catalog
        self._stores = stores
        self._query = query

    def get_persisted(self, name: str) -> str | None:
        store = self._stores.get(self._catalog.get(name).storage)
        if store is None:
            return None
        return store.get(name)

    def get_query(self, name: str) -> str | None:
        if self._query is None:
            return None
        return self._query.get(name)


__all__ = [
    "DEFAULT_KEY_PREFIX",
    "CatalogOverrideLookup",
    "OverrideLookup",
    "OverrideStore",
    "QueryOverrides",
    "StorageBackend",
]
