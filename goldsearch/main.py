"""FastAPI application assembly."""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from goldsearch import __version__
from goldsearch.core.registry import FunctionRegistry, default_registry
from goldsearch.api import solve

logger = logging.getLogger(__name__)


def create_app(registry: FunctionRegistry | None = None) -> FastAPI:
    app = FastAPI(title="goldsearch", version=__version__)
    app.state.registry = registry if registry is not None else default_registry()
    logger.info("Serving %d function(s)", app.state.registry.size())

    cors_origins = os.environ.get("CORS_ORIGINS", "")
    if cors_origins:
        origins = [o.strip() for o in cors_origins.split(",") if o.strip()]
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    app.include_router(solve.router)
    return app
