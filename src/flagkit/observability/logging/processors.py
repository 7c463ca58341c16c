"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

import enum
from typing import Any

import structlog


class FlagContextProcessor:
    """structlog processor that replaces enum members in event dicts with their values.

    Usage::

        structlog.configure(processors=[FlagContextProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, enum.Enum):
                event_dict[key] = value.value
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["FlagContextProcessor", "get_logger"]
