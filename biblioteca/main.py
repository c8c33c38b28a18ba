"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from biblioteca.api import users
from biblioteca.api.errors import register_exception_handlers
from biblioteca.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Starting Biblioteca API ({settings.environment})")
    yield
    logger.info("Biblioteca API stopped")


app = FastAPI(
    title="Biblioteca API",
    description="Library management backend for users, books and loans",
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Register routers
app.include_router(users.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "biblioteca.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
