"""
Production FastAPI Application

Hotel booking service: HTTP API over PostgreSQL.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig

# Register ORM models on Base.metadata before create_all
import src.service.hotel_booking.driven_adapter.model  # noqa: F401


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Hotel Booking] Starting up...')

    tracing = TracingConfig(service_name='hotel-booking')
    tracing.setup()
    Logger.base.info('📊 [Hotel Booking] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Hotel Booking] Dependency injection wired')

    engine = get_engine()
    if tracing.enabled:
        tracing.instrument_sqlalchemy(engine=engine)
        Logger.base.info('🗄️  [Hotel Booking] Database engine instrumented')

    if settings.CREATE_TABLES_ON_STARTUP:
        await create_db_and_tables()
        Logger.base.info('🗄️  [Hotel Booking] Tables ensured')

    if settings.BOOKING_STRICT_CAPACITY:
        Logger.base.info('🔒 [Hotel Booking] Strict capacity enabled (room row locked on write)')

    Logger.base.info('✅ [Hotel Booking] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Hotel Booking] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Hotel Booking] Database engine disposed')

    tracing.shutdown()
    container.unwire()

    Logger.base.info('👋 [Hotel Booking] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
