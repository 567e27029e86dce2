"""
=============================================================================
BingeBase API - unified movie/TV catalog and watchlist
=============================================================================
  - Search aggregated over TMDB movie and TV results (3-page window)
  - Movie details enriched with watch providers, trailer and OMDB ratings
  - Trending and genre listings proxied from TMDB
  - Per-user watchlist persisted in SQLite
=============================================================================
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config import settings
from .dependencies import init_resources, close_resources
from .exceptions import (
    BingeBaseException,
    bingebase_exception_handler,
    global_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from .limiter import limiter
from .logging_config import setup_logging
from .middleware import RequestTrackingMiddleware
from .routers import detail_router, health_router, search_router, watchlist_router

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Open the store and the upstream HTTP client for the process lifetime"""
    await init_resources(settings)
    logger.info("All connections initialized", extra={"db_path": settings.DB_PATH})
    yield
    await close_resources()
    logger.info("All connections closed")


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="BingeBase API",
        description="Movie and TV search, details and watchlist aggregated from TMDB and OMDB",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.limiter = limiter

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.add_middleware(RequestTrackingMiddleware)

    app.add_exception_handler(BingeBaseException, bingebase_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(health_router.router, prefix=API_PREFIX, tags=["health"])
    app.include_router(search_router.router, prefix=API_PREFIX, tags=["search"])
    app.include_router(detail_router.router, prefix=API_PREFIX, tags=["details"])
    app.include_router(watchlist_router.router, prefix=API_PREFIX, tags=["watchlist"])

    return app


app = create_app()
