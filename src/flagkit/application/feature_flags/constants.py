"""Application feature flags – closed enumerations and the status table."""
from __future__ import annotations

import enum


class _ParseableEnum(str, enum.Enum):
    """``str`` enum that also accepts a fixed set of aliases when parsing."""

    @classmethod
    def _aliases(cls) -> dict[str, str]:
        return {}

    @classmethod
    def parse(cls, value: object):
        """Return the member for *value* (case-insensitive, aliases allowed).

        Raises :class:`ValueError` when *value* names no member.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"{cls.__name__} expects a string, got {type(value).__name__}")
        token = value.strip().lower()
        token = cls._aliases().get(token, token)
        try:
            return cls(token)
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"{value!r} is not a valid {cls.__name__} (expected one of: {choices})") from None


class FeatureState(_ParseableEnum):
    """Normalised outcome of a flag; ``UNSET`` behaves as off."""

    ON = "on"
    OFF = "off"
    UNSET = "unset"


class DeployEnv(_ParseableEnum):
    LOCAL = "local"
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def _aliases(cls) -> dict[str, str]:
        return {"dev": "development", "prod": "production"}


class Storage(_ParseableEnum):
    """Medium a flag's user override lives in."""

    NONE = "none"
    SESSION = "session"
    PERSISTENT = "persistent"

    @classmethod
    def _aliases(cls) -> dict[str, str]:
        return {"cookie": "session", "memory": "session", "local": "persistent"}


# Status strings a catalog may use.  ``switchable`` pins no state: the flag
# resolves to its default state unless an override says otherwise.
SWITCHABLE = "switchable"

_STATE_TOKENS: dict[str, FeatureState] = {
    "on": FeatureState.ON,
    "enabled": FeatureState.ON,
    "off": FeatureState.OFF,
    "disabled": FeatureState.OFF,
}

FLAG_STATUSES: frozenset[str] = frozenset(_STATE_TOKENS) | {SWITCHABLE}


def state_for_status(status: str | None) -> FeatureState | None:
    """Map a status (or override) string to a concrete state.

    Returns ``None`` for ``switchable``, ``None`` and any unrecognised token so
    the caller can fall through to the next precedence level.
    """
    if not isinstance(status, str):
        return None
    return _STATE_TOKENS.get(status.strip().lower())


__all__ = [
    "FLAG_STATUSES",
    "SWITCHABLE",
    "DeployEnv",
    "FeatureState",
    "Storage",
    "state_for_status",
]
