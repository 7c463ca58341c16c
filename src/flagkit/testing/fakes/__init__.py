"""Testing fakes – in-memory doubles for flagkit ports."""
from flagkit.testing.fakes.feature_flags import FakeOverrideLookup, FakeStorageBackend

__all__ = ["FakeOverrideLookup", "FakeStorageBackend"]
