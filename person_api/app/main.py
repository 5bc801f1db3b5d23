"""
Main entrypoint for the Person API.

This module assembles the FastAPI application, sets up logging,
creates the person store and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Serve it with uvicorn
or another ASGI server, e.g.::

    uvicorn person_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.store import PersonStore, init_store
from .api.v1.router import router as v1_router


logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed request bodies with 400 instead of FastAPI's 422."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each application owns its own ``PersonStore``, kept on
    ``app.state.store`` and reached by handlers through the
    ``get_store`` dependency.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.store = PersonStore()
    if settings.seed_sample_data:
        init_store(app.state.store)
        logger.info("Loaded %d sample persons", len(app.state.store))

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
