"""Application feature flags – FlagService composition root."""
from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Sequence

from flagkit.application.feature_flags.catalog import FlagCatalog
from flagkit.application.feature_flags.constants import FeatureState, Storage
from flagkit.application.feature_flags.engine import ResolutionEngine
from flagkit.application.feature_flags.feature_flag import FeatureFlag
from flagkit.application.feature_flags.provider import (
    EnvironmentProvider,
    SettingsEnvironmentProvider,
)
from flagkit.application.feature_flags.storage import (
    CatalogOverrideLookup,
    OverrideStore,
    QueryOverrides,
    StorageBackend,
)
from flagkit.config.validation import MissingRequiredSettingError
from flagkit.kernel.errors import UnsupportedStorageError
from flagkit.observability.logging import JsonLoggerFactory, get_logger

if TYPE_CHECKING:
    from flagkit.config.settings import FlagSettings

QueryParams = Mapping[str, str | Sequence[str]]

_log = get_logger(__name__)


class FlagService:
    """Resolve flags against the live environment and override storage.

    *backends* maps each :class:`Storage` medium to the backend holding its
    overrides.  A flag whose medium has no backend reads no persisted override,
    and writing one raises :class:`UnsupportedStorageError`.

    Usage::

        service = FlagService(
            FlagCatalog.from_file("feature-flags.json"),
            StaticEnvironmentProvider("staging"),
            {Storage.SESSION: cookie_backend, Storage.PERSISTENT: local_backend},
        )
        if service.is_on("checkout-v2", query=request.query_params):
            ...
    """

    def __init__(
        self,
        catalog: FlagCatalog,
        environment: EnvironmentProvider,
        backends: Mapping[Storage, StorageBackend] | None = None,
        *,
        key_prefix: str = "ff_",
        query_prefix: str = "ff_",
    ) -> None:
        self._catalog = catalog
        self._engine = ResolutionEngine(catalog)
        self._environment = environment
        self._stores: dict[Storage, OverrideStore] = {
            Storage.parse(medium): OverrideStore(backend, key_prefix=key_prefix)
            for medium, backend in (backends or {}).items()
        }
        self._stores.pop(Storage.NONE, None)
        self._query_prefix = query_prefix

    @classmethod
    def from_settings(
        cls,
        settings: "FlagSettings",
        backends: Mapping[Storage, StorageBackend] | None = None,
        catalog: FlagCatalog | None = None,
        *,
        configure_logging: bool = False,
    ) -> "FlagService":
        """Build a service from :class:`FlagSettings`.

        The catalog is read from ``settings.catalog_path`` unless given.  With
        *configure_logging*, JSON logging is set up at ``settings.log_level``.
        """
        if configure_logging:
            JsonLoggerFactory.configure(level=settings.level)
        if catalog is None:
            if not settings.catalog_path:
                raise MissingRequiredSettingError("FLAGS_CATALOG_PATH")
            catalog = FlagCatalog.from_file(settings.catalog_path)
        _log.info("flag_service_configured", **settings.to_dict())
        return cls(
            catalog,
            SettingsEnvironmentProvider(settings),
            backends,
            key_prefix=settings.override_key_prefix,
            query_prefix=settings.query_param_prefix,
        )

    @property
    def catalog(self) -> FlagCatalog:
        return self._catalog

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, name: str, query: QueryParams | None = None) -> FeatureFlag:
        """Resolve *name* with the current environment and overrides.

        *query* holds the request's query parameters, if any; a query
        override only affects this call.
        """
        return self._engine.resolve(name, self._environment.current(), self._lookup(query))

    def resolve_all(self, query: QueryParams | None = None) -> list[FeatureFlag]:
        """Resolve every catalog flag, in catalog order."""
        env = self._environment.current()
        lookup = self._lookup(query)
        return [self._engine.resolve(name, env, lookup) for name in self._catalog]

    def is_on(self, name: str, query: QueryParams | None = None) -> bool:
        return self.resolve(name, query).is_on

    # ------------------------------------------------------------------
    # Override lifecycle
    # ------------------------------------------------------------------

    def set_override(self, name: str, value: FeatureState | str) -> None:
        """Persist *value* as the user override for *name*.

        ``FeatureState.UNSET`` clears the override.  Values that do not parse
        are stored as given and ignored at resolution time.
        """
        store = self._store_for(name)
        if isinstance(value, FeatureState):
            if value is FeatureState.UNSET:
                self.clear_override(name)
                return
            value = value.value
        store.set(name, value)
        _log.info("flag_override_set", flag=name, value=value)

    def clear_override(self, name: str) -> None:
        """Remove the persisted override for *name*; removing nothing is fine."""
        definition = self._catalog.get(name)
        store = self._stores.get(definition.storage)
        if store is None:
            return
        store.remove(name)
        _log.info("flag_override_cleared", flag=name)

    def _store_for(self, name: str) -> OverrideStore:
        definition = self._catalog.get(name)
        store = self._stores.get(definition.storage)
        if store is None:
            _log.warning("flag_override_rejected", flag=name, storage=definition.storage)
            raise UnsupportedStorageError(name, definition.storage.value)
        return store

    def _lookup(self, query: QueryParams | None) -> CatalogOverrideLookup:
        params = None if query is None else QueryOverrides(query, prefix=self._query_prefix)
        return CatalogOverrideLookup(self._catalog, self._stores, params)


__all__ = ["FlagService", "QueryParams"]
