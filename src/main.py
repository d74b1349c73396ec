"""
Production FastAPI Application

Hotel inventory API gated by enrollment and ticket payment rules.
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


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Hotel Service] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Hotel Service] Dependency injection wired')

    # Initialize database engine on the serving event loop
    get_engine()
    Logger.base.info('🗄️  [Hotel Service] Database engine ready')

    if settings.AUTO_CREATE_TABLES:
        await create_db_and_tables()
        Logger.base.info('🧱 [Hotel Service] Database tables ensured')

    Logger.base.info('✅ [Hotel Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Hotel Service] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Hotel Service] Database engine disposed')

    container.unwire()

    Logger.base.info('👋 [Hotel Service] Shutdown complete')


app = create_app(
    lifespan=lifespan,
    description='Hotel Access Service - lists hotels and rooms for paid in-person tickets',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
