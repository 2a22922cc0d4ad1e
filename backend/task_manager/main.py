"""Task Manager API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TaskManagerError to `{"message": ...}` responses
    - CORS configured from settings (not hardcoded)
    - One shared database engine opened on startup, disposed on shutdown
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from task_manager import __version__
from task_manager.api.error_handlers import register_error_handlers
from task_manager.api.routes import health, tasks, users
from task_manager.config import get_settings
from task_manager.infrastructure.database import close_db, init_db
from task_manager.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await manager.create_tables()
    logger.info("Task Manager API started", extra={"port": settings.port})
    yield
    await close_db()
    logger.info("Task Manager API shutting down")


app = FastAPI(
    title="Task Manager API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(tasks.router)


def run() -> None:
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    settings = get_settings()
    uvicorn.run(
        "task_manager.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
