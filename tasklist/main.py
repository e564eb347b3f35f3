"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tasklist.api import tasks, users
from tasklist.config import get_settings
from tasklist.database import init_db
from tasklist.errors import TaskListError
from tasklist.logging_config import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    setup_logging(settings.log_level)
    init_db()
    logger.info(f"Task list API started ({settings.environment})")
    yield


app = FastAPI(
    title="Task List API",
    description="Multi-user task lists authenticated by access key",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(TaskListError)
async def task_list_error_handler(request: Request, exc: TaskListError) -> JSONResponse:
    """Answer every expected failure with its status code and message."""
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


# Register routers
app.include_router(users.router)
app.include_router(tasks.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
