"""Logging setup."""

from identity_core.observability.logging import configure_logging

__all__ = ["configure_logging"]
