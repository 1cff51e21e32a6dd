"""
Main entrypoint for the Message Store API.

This module assembles the FastAPI application, sets up logging,
creates the message store and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn message_store_api.app.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.message_store import MessageStore
from .services.storage import build_storage


def create_app(settings: Optional[Settings] = None, store: Optional[MessageStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment driven
        module level settings.
    store : Optional[MessageStore]
        Store to serve.  When omitted, a store is built on the backend
        named by ``settings.storage_backend``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  The store is
        available as ``app.state.store`` and is closed on shutdown.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        app.state.store.close()

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.store = store or MessageStore(build_storage(settings))

    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
