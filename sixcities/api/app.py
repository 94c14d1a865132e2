"""
Main FastAPI Application

Six Cities API with the offer module mounted.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from sixcities.api.exceptions import HttpError
from sixcities.config.logging_config import setup_logging
from sixcities.config.settings import Settings
from sixcities.offers.container import create_offer_container
from sixcities.storage.database import get_engine, get_session_factory, init_database


logger = logging.getLogger("sixcities.api")


def error_body(status_code: int, message: str, detail: Optional[Any] = None) -> dict:
    return {"statusCode": status_code, "message": message, "detail": jsonable_encoder(detail)}


def register_exception_handlers(app: FastAPI) -> None:
    """Map errors raised by handlers onto ``{statusCode, message, detail}`` bodies."""

    @app.exception_handler(HttpError)
    async def http_error_handler(request, exc: HttpError):
        logger.warning("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.status_code, exc.message, exc.source)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=error_body(status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation error", exc.errors())
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request, exc: IntegrityError):
        logger.warning("%s %s rejected by storage: %s", request.method, request.url.path, exc.orig)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(status.HTTP_400_BAD_REQUEST, "Rejected by storage", str(exc.orig))
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.status_code, str(exc.detail))
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", str(exc))
        )


def create_app(database_url: Optional[str] = None) -> FastAPI:
    """
    Build the application.

    Args:
        database_url: SQLAlchemy URL (uses Settings.DATABASE_URL if None)

    Returns:
        FastAPI app with the offer routes mounted under Settings.API_PREFIX
    """
    setup_logging()

    engine = get_engine(database_url)
    container = create_offer_container(get_session_factory(engine))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_database(engine=engine)
        yield
        engine.dispose()

    app = FastAPI(
        title="Six Cities API",
        description="Rental offers API",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.container = container

    # CORS middleware (allow all origins for development)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(container.offer_controller.router, prefix=Settings.API_PREFIX, tags=["offers"])

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    register_exception_handlers(app)

    return app

