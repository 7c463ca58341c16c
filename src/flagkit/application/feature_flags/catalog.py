"""Application feature flags – FlagCatalog.

The catalog is the boundary where raw flag records (usually parsed from a
JSON definitions file) become :class:`FlagDefinition` objects.  All defaulting
and validation happens here, so the resolution engine only ever sees fully
populated records.

Accepted record shape::

    {
        "status": "switchable" | {"staging": "on", "production": "off"},
        "description": "...",          # optional
        "data": {...},                 # optional, passed through
        "defaultState": "on",          # optional (or default_state)
        "supportsQuery": false,        # optional (or supports_query), default true
        "storage": "cookie"            # optional, default "none"
    }
"""
from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from flagkit.application.feature_flags.constants import (
    FLAG_STATUSES,
    DeployEnv,
    FeatureState,
    Storage,
)
from flagkit.application.feature_flags.feature_flag import FlagDefinition
from flagkit.config.validation import CatalogError
from flagkit.kernel.errors import UnknownFlagError
from flagkit.observability.logging import get_logger

_log = get_logger(__name__)

_KNOWN_KEYS = frozenset({
    "status",
    "description",
    "data",
    "defaultState",
    "default_state",
    "supportsQuery",
    "supports_query",
    "storage",
})


class FlagCatalog:
    """Immutable, insertion-ordered mapping of flag name to :class:`FlagDefinition`."""

    def __init__(self, definitions: Mapping[str, FlagDefinition]) -> None:
        self._definitions: Mapping[str, FlagDefinition] = MappingProxyType(dict(definitions))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_mapping(cls, records: Mapping[str, Any]) -> "FlagCatalog":
        """Validate and normalise raw *records* keyed by flag name."""
        if not isinstance(records, Mapping):
            raise CatalogError("Flag definitions must be a mapping of name to record")
        definitions = {}
        for name, record in records.items():
            if not isinstance(name, str) or not name:
                raise CatalogError(f"Invalid flag name {name!r}")
            definitions[name] = _parse_record(name, record)
        catalog = cls(definitions)
        _log.info("flag_catalog_loaded", flag_count=len(catalog))
        return catalog

    @classmethod
    def from_json(cls, text: str) -> "FlagCatalog":
        """Parse a JSON document; flags live under ``features`` or at the top level."""
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CatalogError(f"Flag definitions are not valid JSON: {exc}", cause=exc) from exc
        if isinstance(document, dict) and _is_envelope(document):
            document = document["features"]
        return cls.from_mapping(document)

    @classmethod
    def from_file(cls, path: str | Path) -> "FlagCatalog":
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogError(f"Cannot read flag definitions from {str(path)!r}", cause=exc) from exc
        return cls.from_json(text)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get(self, name: str) -> FlagDefinition:
        """Return the definition for *name*; raises :class:`UnknownFlagError`."""
        try:
            return self._definitions[name]
        except (KeyError, TypeError):
            raise UnknownFlagError(str(name)) from None

    def names(self) -> list[str]:
        return list(self._definitions)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._definitions

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"FlagCatalog(flags={self.names()!r})"


def _is_envelope(document: Mapping[str, Any]) -> bool:
    """A top-level ``features`` key is the envelope unless it reads as a flag record itself."""
    features = document.get("features")
    if not isinstance(features, Mapping):
        return False
    return not ("status" in features and set(features) <= _KNOWN_KEYS)


def _pick(record: Mapping[str, Any], camel: str, snake: str) -> Any:
    if camel in record:
        return record[camel]
    return record.get(snake)


def _parse_status(name: str, raw: Any) -> str | dict[DeployEnv, str]:
    if isinstance(raw, str):
        return _check_status(name, raw)
    if isinstance(raw, Mapping):
        statuses: dict[DeployEnv, str] = {}
        for env_key, status in raw.items():
            try:
                env = DeployEnv.parse(env_key)
            except ValueError as exc:
                raise CatalogError(f"Flag '{name}': {exc}", flag=name) from exc
            if not isinstance(status, str):
                raise CatalogError(f"Flag '{name}': status for '{env_key}' must be a string", flag=name)
            if env in statuses:
                raise CatalogError(f"Flag '{name}': duplicate status for '{env.value}'", flag=name)
            statuses[env] = _check_status(name, status)
        return statuses
    raise CatalogError(f"Flag '{name}': status must be a string or a mapping", flag=name)


def _check_status(name: str, status: str) -> str:
    if status.strip().lower() not in FLAG_STATUSES:
        choices = ", ".join(sorted(FLAG_STATUSES))
        raise CatalogError(f"Flag '{name}': unknown status {status!r} (expected one of: {choices})", flag=name)
    return status


def _parse_record(name: str, record: Any) -> FlagDefinition:
    if not isinstance(record, Mapping):
        raise CatalogError(f"Flag '{name}': record must be a mapping", flag=name)
    if "status" not in record:
        raise CatalogError(f"Flag '{name}': missing 'status'", flag=name)
    unknown = set(record) - _KNOWN_KEYS
    if unknown:
        raise CatalogError(f"Flag '{name}': unknown keys {sorted(unknown)}", flag=name)

    default_state = _pick(record, "defaultState", "default_state")
    supports_query = _pick(record, "supportsQuery", "supports_query")
    storage = record.get("storage")
    description = record.get("description")

    try:
        parsed_state = FeatureState.UNSET if default_state is None else FeatureState.parse(default_state)
        parsed_storage = Storage.NONE if storage is None else Storage.parse(storage)
    except ValueError as exc:
        raise CatalogError(f"Flag '{name}': {exc}", flag=name) from exc

    if supports_query is not None and not isinstance(supports_query, bool):
        raise CatalogError(f"Flag '{name}': supportsQuery must be a boolean", flag=name)
    if description is not None and not isinstance(description, str):
        raise CatalogError(f"Flag '{name}': description must be a string", flag=name)

    return FlagDefinition(
        status=_parse_status(name, record["status"]),
        description=description or "",
        data=record.get("data"),
        default_state=parsed_state,
        supports_query=True if supports_query is None else supports_query,
        storage=parsed_storage,
    )


__all__ = ["FlagCatalog"]
