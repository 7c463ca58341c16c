"""Observability – structured logging for flag resolution."""
