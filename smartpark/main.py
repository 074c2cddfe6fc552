"""
Main FastAPI application entry point.
"""
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from smartpark.config import Settings, get_settings
from smartpark.database import dispose_engine, init_db
from smartpark.log import configure_logging
from smartpark.middleware import setup_exception_handlers, setup_request_logging
from smartpark.routers import auth, cars, packages, payments, reports, services
from smartpark.sessions import SessionStore


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its session store, middleware and routers."""
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan events for the application.
        Handles startup and shutdown events.
        """
        logger.info("Starting {} {}", settings.app_name, settings.app_version)
        await init_db(settings)
        logger.info("API available at {}", settings.api_prefix)

        yield

        logger.info("Shutting down {}", settings.app_name)
        await dispose_engine()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="""
        ## SmartPark API

        Car-wash management: car registration, service packages, service
        records, payments with bills, and daily/summary reports.

        Authentication uses a server-side session held in an HttpOnly cookie.
        """,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.sessions = SessionStore(ttl=timedelta(hours=settings.session_ttl_hours))

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if settings.log_requests:
        setup_request_logging(app)
    setup_exception_handlers(app)

    # Include routers
    app.include_router(auth.router, prefix=settings.api_prefix)
    app.include_router(cars.router, prefix=settings.api_prefix)
    app.include_router(packages.router, prefix=settings.api_prefix)
    app.include_router(services.router, prefix=settings.api_prefix)
    app.include_router(payments.router, prefix=settings.api_prefix)
    app.include_router(reports.router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": f"Welcome to {settings.app_name} API",
            "version": settings.app_version,
            "docs": "/docs",
            "redoc": "/redoc",
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.app_version,
        }

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "smartpark.main:app",
        host="0.0.0.0",
        port=5000,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
