"""
Social Gateway - Main Application
Forwards resource requests to the downstream read/write service
"""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import httpx
import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.api import comments, feedback, health, likes, posts, users
from app.config import Settings, get_settings
from app.services.dispatcher import ForwardingDispatcher, build_client
from app.utils.logger import setup_logging
from app.utils.responses import (
    DownstreamFailure,
    DownstreamUnavailable,
    downstream_failure_handler,
    downstream_unavailable_handler,
)

logger = structlog.get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None
) -> FastAPI:
    """
    Build the gateway application

    Args:
        settings: Overrides the environment-derived settings
        client: Overrides the downstream HTTP client (closed on shutdown)
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format, settings.logging_config_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan events"""
        logger.info(
            "Starting gateway",
            app_name=settings.app_name,
            downstream=settings.downstream_base_url,
        )
        http_client = client or build_client(settings.downstream_base_url, settings.downstream_timeout)
        app.state.dispatcher = ForwardingDispatcher(
            http_client,
            forward_authorization=settings.forward_authorization,
        )

        yield

        await http_client.aclose()
        logger.info("Gateway shutdown complete")

    app = FastAPI(
        title=settings.app_name,
        description="Forwards User, Post, Comment, Like and Feedback requests to the downstream service",
        version=__version__,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all incoming requests"""
        started = time.perf_counter()
        logger.info(
            "Request received",
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else "unknown"
        )

        response = await call_next(request)

        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            elapsed_ms=round((time.perf_counter() - started) * 1000, 1)
        )
        return response

    app.add_exception_handler(DownstreamFailure, downstream_failure_handler)
    app.add_exception_handler(DownstreamUnavailable, downstream_unavailable_handler)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler"""
        logger.error(
            "Unhandled exception",
            error=str(exc),
            method=request.method,
            path=request.url.path,
            exc_info=True
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": "An unexpected error occurred"
            }
        )

    # Register routes
    app.include_router(health.router, tags=["Health"])
    app.include_router(users.router)
    app.include_router(posts.router)
    app.include_router(comments.router)
    app.include_router(likes.router)
    app.include_router(feedback.router)

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "service": "social-gateway",
            "version": __version__,
            "status": "running",
            "docs": "/docs"
        }

    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8080,
        log_level="info"
    )
