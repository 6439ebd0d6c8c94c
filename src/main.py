"""
FastAPI Production Application

Main entry point for the Storefront Catalog API.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
import structlog

from src.config import configure_logging, get_settings
from src.serving.api import create_api_app

settings = get_settings()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    configure_logging()
    
    logger.info("Starting Storefront Catalog API", app=settings.app_name, environment=settings.app_env)
    
    # A failed load is logged by the store; the API still serves
    store = app.state.catalog.store
    if not store.is_loaded and not store.load_once():
        logger.warning("Serving without seed data", path=str(store.seed_path))
    
    yield
    
    logger.info("Shutting down...")


app = create_api_app(lifespan=lifespan)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
