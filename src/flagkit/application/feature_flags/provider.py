"""Application feature flags – EnvironmentProvider port and implementations."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from flagkit.application.feature_flags.constants import DeployEnv

if TYPE_CHECKING:
    from flagkit.config.settings import FlagSettings


class EnvironmentProvider(abc.ABC):
    """Port: report the deployment environment of the running process."""

    @abc.abstractmethod
    def current(self) -> DeployEnv: ...


class StaticEnvironmentProvider(EnvironmentProvider):
    """Always reports the environment it was constructed with."""

    def __init__(self, env: DeployEnv | str) -> None:
        self._env = DeployEnv.parse(env)

    def current(self) -> DeployEnv:
        return self._env


class SettingsEnvironmentProvider(EnvironmentProvider):
    """Reads the environment from :class:`~flagkit.config.settings.FlagSettings`."""

    def __init__(self, settings: "FlagSettings") -> None:
        self._settings = settings

    def current(self) -> DeployEnv:
        return self._settings.environment


__all__ = ["EnvironmentProvider", "SettingsEnvironmentProvider", "StaticEnvironmentProvider"]
