"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- POST /login, GET /chat, POST /chat, GET /room, POST /room, GET /health
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.ext.asyncio import AsyncEngine
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from chatroom.config.logging_config import (
    NO_CORRELATION_ID,
    correlation_id_var,
    setup_logging,
)
from chatroom.config.settings import Config
from chatroom.infrastructure.persistence.database import create_schema
from chatroom.presentation.api import auth_router, chat_router, rooms_router
from chatroom.presentation.api.auth import limiter
from chatroom.presentation.schemas import ApiFailure
from chatroom.setup.ioc import create_container

# Setup logging
setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)
logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


def _failure(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ApiFailure.for_status_code(status_code, message).model_dump(),
        headers=headers,
    )


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(loc) for loc in error.get("loc", ()) if loc != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return "; ".join(parts) or "Invalid request"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: create missing tables
    - Shutdown: close DI container (disposes the engine)
    """
    container: AsyncContainer = app.state.dishka_container
    engine = await container.get(AsyncEngine)
    await create_schema(engine)
    logger.info("FastAPI application started. Database schema ready.")
    yield
    await container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use; a default one is built from Config when omitted

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Chat Room API",
        description="Rooms, members and chat history",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container or create_container(), app)

    app.state.limiter = limiter

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        logger.info("Validation error on %s %s: %s", request.method, request.url.path, message)
        return _failure(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code >= 500:
            logger.error("HTTP %s on %s: %s", exc.status_code, request.url.path, exc.detail)
        else:
            logger.info("HTTP %s on %s: %s", exc.status_code, request.url.path, exc.detail)
        return _failure(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        logger.warning("Rate limit exceeded on %s: %s", request.url.path, exc.detail)
        return _failure(status.HTTP_429_TOO_MANY_REQUESTS, f"Rate limit exceeded: {exc.detail}")

    # Global exception handler, details stay in the log
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        # Rendered outside CorrelationIdMiddleware, so the header is set here
        return _failure(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            headers={"X-Correlation-ID": correlation_id_var.get()},
        )

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    # Register routers
    app.include_router(auth_router)  # POST /login
    app.include_router(chat_router)  # GET /chat, POST /chat
    app.include_router(rooms_router)  # GET /room, POST /room

    return app


# Create the app instance
app = create_fastapi_app()
