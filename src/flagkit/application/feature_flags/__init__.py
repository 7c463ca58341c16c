"""Application feature flags – catalog, resolution engine and service."""
from flagkit.application.feature_flags.constants import (
    FLAG_STATUSES,
    SWITCHABLE,
    DeployEnv,
    FeatureState,
    Storage,
    state_for_status,
)
from flagkit.application.feature_flags.feature_flag import FeatureFlag, FlagDefinition
from flagkit.application.feature_flags.catalog import FlagCatalog
from flagkit.application.feature_flags.storage import (
    CatalogOverrideLookup,
    OverrideLookup,
    OverrideStore,
    QueryOverrides,
    StorageBackend,
)
from flagkit.application.feature_flags.in_memory import InMemoryStorageBackend
from flagkit.application.feature_flags.provider import (
    EnvironmentProvider,
    SettingsEnvironmentProvider,
    StaticEnvironmentProvider,
)
from flagkit.application.feature_flags.engine import ResolutionEngine
from flagkit.application.feature_flags.service import FlagService

__all__ = [
    "FLAG_STATUSES",
    "SWITCHABLE",
    "CatalogOverrideLookup",
    "DeployEnv",
    "EnvironmentProvider",
    "FeatureFlag",
    "FeatureState",
    "FlagCatalog",
    "FlagDefinition",
    "FlagService",
    "InMemoryStorageBackend",
    "OverrideLookup",
    "OverrideStore",
    "QueryOverrides",
    "ResolutionEngine",
    "SettingsEnvironmentProvider",
    "StaticEnvironmentProvider",
    "Storage",
    "StorageBackend",
    "state_for_status",
]
