"""Application feature flags – FlagDefinition record and FeatureFlag view."""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Any, Mapping

from flagkit.application.feature_flags.constants import DeployEnv, FeatureState, Storage

FlagStatusRecord = str | Mapping[DeployEnv, str]


@dataclasses.dataclass(frozen=True)
class FlagDefinition:
    """A catalog entry, fully populated at load time.

    ``status`` is either one status string for every environment or a partial
    mapping from :class:`DeployEnv` to status string.
    """
    status: FlagStatusRecord
    description: str = ""
    data: Any = None
    default_state: FeatureState = FeatureState.UNSET
    supports_query: bool = True
    storage: Storage = Storage.NONE

    def __post_init__(self) -> None:
        if not isinstance(self.status, str):
            object.__setattr__(self, "status", MappingProxyType(dict(self.status)))

    def status_for(self, env: DeployEnv) -> str | None:
        """Return the status configured for *env*, or ``None``."""
        if isinstance(self.status, str):
            return self.status
        return self.status.get(env)


@dataclasses.dataclass(frozen=True)
class FeatureFlag:
    """A flag resolved for one environment and one set of overrides."""
    name: str
    status: str | None
    state: FeatureState
    preferred_state: FeatureState
    description: str = ""
    data: Any = None
    supports_query: bool = True
    storage: Storage = Storage.NONE

    @property
    def is_on(self) -> bool:
        return self.state is FeatureState.ON

    @property
    def is_overridden(self) -> bool:
        """``True`` when an override moved the flag away from its preferred state."""
        return self.state is not self.preferred_state

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status,
            "state": self.state.value,
            "preferred_state": self.preferred_state.value,
            "description": self.description,
            "data": self.data,
            "supports_query": self.supports_query,
            "storage": self.storage.value,
        }


__all__ = ["FeatureFlag", "FlagDefinition", "FlagStatusRecord"]
