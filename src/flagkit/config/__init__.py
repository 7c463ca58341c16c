"""Configuration – 12-factor settings and validation errors."""
