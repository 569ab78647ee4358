"""Immutable optional values that track being set apart from being empty."""

__version__ = "1.0.0"

__all__ = ["any_optional", "optional"]