"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from funcystr.api.routes import functions, resolve
from funcystr.resolver import FunctionRegistry, TemplateResolver
from funcystr.utilities.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(registry: FunctionRegistry | None = None) -> FastAPI:
    """Create the API app around a resolver.

    Args:
        registry: Functions to expose. Defaults to the built-in library.
    """
    setup_logging()

    if registry is None:
        from funcystr.functions import default_registry

        registry = default_registry()

    app = FastAPI(title="funcystr")
    app.state.resolver = TemplateResolver(registry)
    app.include_router(resolve.router, prefix="/api", tags=["resolve"])
    app.include_router(functions.router, prefix="/api", tags=["functions"])

    logger.info("[API] App created with %d functions", len(registry))
    return app
