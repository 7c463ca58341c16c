"""Unit tests for observability logging."""

from __future__ import annotations

import logging

import structlog
from structlog.testing import capture_logs

from flagkit.application.feature_flags import FeatureState, Storage
from flagkit.observability.logging import FlagContextProcessor, JsonLoggerFactory, get_logger


class TestFlagContextProcessor:
    def test_renders_enum_values(self) -> None:
        event = {"event": "x", "state": FeatureState.ON, "storage": Storage.NONE, "flag": "f"}
        result = FlagContextProcessor()(None, "info", event)
        assert result == {"event": "x", "state": "on", "storage": "none", "flag": "f"}


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("flagkit.test", component="engine").info("hello")
        assert logs[0]["event"] == "hello"
        assert logs[0]["component"] == "engine"


class TestJsonLoggerFactory:
    def test_configure_sets_root_level(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        try:
            assert logging.getLogger().level == logging.WARNING
            assert len(logging.getLogger().handlers) == 1
        finally:
            structlog.reset_defaults()
            logging.getLogger().handlers.clear()
