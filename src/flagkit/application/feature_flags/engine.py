"""Application feature flags – ResolutionEngine.

Precedence, highest first:

1. query override (only when the flag supports query overrides),
2. persisted override (only when the flag has a storage medium),
3. the preferred state derived from the catalog alone.

An override value that does not parse to a state is ignored and resolution
falls through to the next level.
"""
from __future__ import annotations

from typing import Callable

from flagkit.application.feature_flags.catalog import FlagCatalog
from flagkit.application.feature_flags.constants import DeployEnv, FeatureState, Storage, state_for_status
from flagkit.application.feature_flags.feature_flag import FeatureFlag, FlagDefinition
from flagkit.application.feature_flags.storage import OverrideLookup
from flagkit.observability.logging import get_logger

_log = get_logger(__name__)


class ResolutionEngine:
    """Turns a catalog entry, an environment and override layers into a :class:`FeatureFlag`.

    Stateless between calls: nothing is cached and nothing is written.
    """

    def __init__(self, catalog: FlagCatalog) -> None:
        self._catalog = catalog

    def resolve(self, name: str, env: DeployEnv, override: OverrideLookup) -> FeatureFlag:
        """Resolve *name* for *env*; raises :class:`UnknownFlagError` for unknown names."""
        definition = self._catalog.get(name)
        status = definition.status_for(env)
        preferred = self.preferred_state(definition, status)
        state = self._override_state(name, definition, override) or preferred
        return FeatureFlag(
            name=name,
            status=status,
            state=state,
            preferred_state=preferred,
            description=definition.description,
            data=definition.data,
            supports_query=definition.supports_query,
            storage=definition.storage,
        )

    @staticmethod
    def preferred_state(definition: FlagDefinition, status: str | None) -> FeatureState:
        """State from the catalog alone: the status, else the definition's default."""
        return state_for_status(status) or definition.default_state

    def _override_state(
        self, name: str, definition: FlagDefinition, override: OverrideLookup
    ) -> FeatureState | None:
        if definition.supports_query:
            state = self._read(name, "query", override.get_query)
            if state is not None:
                return state
        if definition.storage is not Storage.NONE:
            return self._read(name, "persisted", override.get_persisted)
        return None

    @staticmethod
    def _read(name: str, layer: str, getter: Callable[[str], str | None]) -> FeatureState | None:
        try:
            raw = getter(name)
        except Exception as exc:  # noqa: BLE001
            _log.warning("flag_override_read_failed", flag=name, layer=layer, error=repr(exc))
            return None
        if raw is None:
            return None
        state = state_for_status(raw)
        if state is None:
            _log.debug("flag_override_ignored", flag=name, layer=layer, value=raw)
        return state


__all__ = ["ResolutionEngine"]
