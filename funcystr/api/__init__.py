"""HTTP API for template resolution."""

from funcystr.api.app import create_app

__all__ = ["create_app"]
