"""
Main entrypoint for the User Quotes API.

This module assembles the FastAPI application: it sets up logging,
wires the repository and quote client into a ``UserService``,
registers error handlers and includes the versioned routers.  The
``create_app`` function performs the wiring and accepts explicit
collaborators so tests can inject an in‑memory repository and a stub
quote client.  An instance built from the environment is created at
import time as ``app``, which makes it easy to run with uvicorn::

    uvicorn user_quotes_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .clients.quote_client import QuoteClient, RandomQuoteClient
from .core.config import Settings, settings
from .core.db import init_db
from .core.exceptions import UserServiceError
from .core.logging_config import setup_logging
from .entities.user import UserEntity
from .repositories import Repository, SqliteUserRepository, build_repository
from .services.user_service import UserService

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[Settings] = None,
    repository: Optional[Repository[UserEntity, int]] = None,
    quote_client: Optional[QuoteClient] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to use; defaults to the module level ``settings``.
    repository : Optional[Repository]
        User repository.  When omitted one is built according to
        ``config.storage_backend``.
    quote_client : Optional[QuoteClient]
        Quote provider.  When omitted a ``RandomQuoteClient`` pointed at
        ``config.quote_api_url`` is used.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or settings
    # Initialise logging before anything else so that the wiring below
    # can safely log messages.
    setup_logging(config.log_level, config.log_file or None)

    if repository is None:
        repository = build_repository(config)
    if quote_client is None:
        quote_client = RandomQuoteClient(
            url=config.quote_api_url,
            field=config.quote_api_field,
            timeout=config.quote_api_timeout,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if isinstance(repository, SqliteUserRepository):
            init_db(repository.db_path)
        logger.info("%s %s started", config.project_name, config.api_version)
        yield
        quote_client.close()
        logger.info("%s shutdown complete", config.project_name)

    app = FastAPI(
        title=config.project_name,
        version=config.api_version,
        debug=config.debug,
        lifespan=lifespan,
    )
    app.state.user_service = UserService(repository, quote_client)

    @app.exception_handler(UserServiceError)
    async def service_error_handler(request: Request, exc: UserServiceError) -> JSONResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    app.include_router(v1_router, prefix=config.api_prefix)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
