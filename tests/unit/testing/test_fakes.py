"""Unit tests for flagkit testing fakes."""

from __future__ import annotations

import pytest

from flagkit.application.feature_flags import OverrideLookup, StorageBackend
from flagkit.testing.fakes import FakeOverrideLookup, FakeStorageBackend


class TestFakeOverrideLookup:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(FakeOverrideLookup(), OverrideLookup)

    def test_configure_and_reset(self) -> None:
        override = FakeOverrideLookup().persist("a", "on").query("a", "off")
        assert override.get_persisted("a") == "on"
        assert override.get_query("a") == "off"
        override.reset()
        assert override.get_persisted("a") is None
        assert override.get_query("a") is None


class TestFakeStorageBackend:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(FakeStorageBackend(), StorageBackend)

    def test_records_calls(self) -> None:
        backend = FakeStorageBackend()
        backend.set("k", "v")
        assert backend.get("k") == "v"
        backend.remove("k")
        assert backend.calls == [("set", "k"), ("get", "k"), ("remove", "k")]
        assert backend.writes() == [("set", "k"), ("remove", "k")]

    def test_fail_with(self) -> None:
        backend = FakeStorageBackend()
        backend.fail_with = OSError("boom")
        with pytest.raises(OSError):
            backend.get("k")
