"""
User Records Backend API Server
Core functionality: CRUD on the users table
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI

from config.settings import Settings, load_settings
from database.connection import init_database, close_database
from api.routes import health, users
from utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application; settings are loaded from the environment when omitted"""
    settings = settings or load_settings()

    logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        app.state.db_pool = await init_database(settings)
        yield
        await close_database(app.state.db_pool)
        app.state.db_pool = None

    app = FastAPI(
        title="User Records Backend",
        description="Backend API for user record management",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.db_pool = None

    # Setup centralized error handling
    setup_error_handling(app)

    # Include API routes
    app.include_router(health.router, tags=["Health"])
    app.include_router(users.router, prefix="/api", tags=["Users"])

    return app


# FastAPI app instance is exported for use by uvicorn
# Server startup is handled by main.py at the project root
app = create_app()
