"""Utilities - logging setup."""

from funcystr.utilities.logging import setup_logging

__all__ = ["setup_logging"]
