"""Observability – structured logging helpers."""
from flagkit.observability.logging.factory import JsonLoggerFactory
from flagkit.observability.logging.processors import FlagContextProcessor, get_logger

__all__ = ["FlagContextProcessor", "JsonLoggerFactory", "get_logger"]
