"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI

from litlink.api import auth, links, profile, public
from litlink.api.error_handlers import register_error_handlers
from litlink.config import Settings, get_settings
from litlink.database import create_db_engine, create_session_factory
from litlink.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build logging and the database engine from the startup settings."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    engine = create_db_engine(settings)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    logger.info(f"litlink API started ({settings.environment})")
    yield
    logger.info("litlink API shutting down")
    engine.dispose()


app = FastAPI(
    title="litlink API",
    description="Link-in-bio backend: accounts, profiles and public link pages",
    version="0.1.0",
    lifespan=lifespan,
)

register_error_handlers(app)

# Register routers
app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(links.router)
app.include_router(public.router)


@app.get("/health")
async def health_check(settings: Annotated[Settings, Depends(get_settings)]):
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
