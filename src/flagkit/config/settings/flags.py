"""Config settings – FlagSettings."""
from __future__ import annotations

import dataclasses
import logging

from flagkit.application.feature_flags.constants import DeployEnv
from flagkit.config.settings.base import Settings
from flagkit.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class FlagSettings(Settings):
    """Runtime settings for flag resolution, read from ``FLAGS_*`` variables."""

    _prefix: dataclasses.ClassVar[str] = "FLAGS"

    deploy_env: str = "local"
    catalog_path: str = ""
    override_key_prefix: str = "ff_"
    query_param_prefix: str = "ff_"
    log_level: str = "INFO"

    def _validate(self) -> None:
        try:
            DeployEnv.parse(self.deploy_env)
        except ValueError as exc:
            raise InvalidSettingValueError("deploy_env", self.deploy_env, str(exc)) from exc
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")

    @property
    def environment(self) -> DeployEnv:
        return DeployEnv.parse(self.deploy_env)

    @property
    def level(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level.upper()]


__all__ = ["FlagSettings"]
