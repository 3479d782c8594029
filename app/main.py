import logging
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.api import api_router
from app.core.config import Settings, settings
from app.core.middleware import add_exception_handlers, add_middleware
from app.db.init_db import init_db
from app.db.store import RecordStore

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

def create_store(app_settings: Settings) -> RecordStore:
    """Build a record store configured from settings, seeded if enabled."""
    ttl = None
    if app_settings.SESSION_TTL_MINUTES is not None:
        ttl = timedelta(minutes=app_settings.SESSION_TTL_MINUTES)

    store = RecordStore(session_ttl=ttl)
    if app_settings.SEED_DEMO_DATA:
        init_db(store)
    return store

def create_app(
    app_settings: Settings = settings,
    store: Optional[RecordStore] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    The record store belongs to the application instance; pass one in to
    share or pre-populate it, otherwise a new one is built from settings.
    """
    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        description="Fleet admin console API for users, cars and incident reports",
        version=app_settings.VERSION,
        openapi_url=f"{app_settings.API_PREFIX}/openapi.json",
        docs_url=f"{app_settings.API_PREFIX}/docs",
    )
    app.state.settings = app_settings
    app.state.store = store if store is not None else create_store(app_settings)

    # Set CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    add_middleware(app, prefix=app_settings.API_PREFIX)
    add_exception_handlers(app)

    # Include API router
    app.include_router(api_router, prefix=app_settings.API_PREFIX)

    @app.get("/")
    async def root():
        """Root endpoint with basic service information."""
        return {
            "message": f"Welcome to {app_settings.PROJECT_NAME}",
            "version": app_settings.VERSION,
            "docs_url": f"{app_settings.API_PREFIX}/docs",
        }

    logger.info(f"{app_settings.PROJECT_NAME} ready, serving under {app_settings.API_PREFIX}")
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=True)
