"""
Main FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from oilsync.config import Settings, get_settings
from oilsync.database import create_engine, create_sessionmaker, init_db
from oilsync.errors import ConflictError, register_exception_handlers
from oilsync.logging_config import RequestLoggingMiddleware, setup_logging
from oilsync.routers import addresses, admin, auth, bookings, dev, health, profile, technicians, vehicles
from oilsync.services.admin import seed_default_accounts
from oilsync.services.notifications import Notifier

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan events for the application.
    Handles startup and shutdown events.
    """
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"Starting {settings.app_name} {settings.app_version} ({settings.environment})")
    engine = create_engine(settings.database_url, echo=settings.database_echo)
    app.state.engine = engine
    app.state.sessionmaker = create_sessionmaker(engine)

    await init_db(engine)
    logger.info(f"Database initialized ({settings.database_backend})")

    if settings.seed_on_startup:
        async with app.state.sessionmaker() as session:
            try:
                await seed_default_accounts(session, settings)
            except ConflictError as e:
                logger.error(f"Default account seeding skipped: {e.message}")

    if not settings.email_configured:
        logger.warning("Email is not configured, OTP emails will only be logged")
    if not settings.sms_configured:
        logger.warning("SMS is not configured, OTP texts will only be logged")
    logger.info(f"API available at: {settings.api_prefix}")

    yield

    # Shutdown
    await engine.dispose()
    logger.info(f"Shutting down {settings.app_name}")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="""
    ## OilSync API

    Booking backend for an at-home oil change service.

    ### Entities:
    * **Users**: Accounts, sessions and OTP email/phone verification
    * **Bookings**: Oil change appointments and their lifecycle
    * **Technicians**: The mobile service team
    * **Vehicles**: Make/model catalogue and VIN decoding
    """,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.notifier = Notifier(settings)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    register_exception_handlers(app)

    for module in (auth, bookings, technicians, vehicles, profile, admin, addresses, health, dev):
        app.include_router(module.router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": f"Welcome to {settings.app_name} API",
            "version": settings.app_version,
            "docs": "/docs",
            "redoc": "/redoc",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "oilsync.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
