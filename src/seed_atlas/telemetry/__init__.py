"""Logging setup for seed-atlas entrypoints."""

from .logging import configure_logging

__all__ = ["configure_logging"]
