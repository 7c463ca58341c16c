"""Application layer – feature flag resolution use cases."""
