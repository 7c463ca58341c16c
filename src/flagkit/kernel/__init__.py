"""Kernel – error hierarchy shared by every flagkit layer."""
