import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from task_api import config
from task_api.database import open_store
from task_api.errors import StorageError
from task_api.logging_setup import setup_logging
from task_api.repository import TaskRepository
from task_api.routers import tasks

logger = logging.getLogger(__name__)


def create_app(database_url: str = config.DATABASE_URL) -> FastAPI:
    """Open the task store and build the application around it.

    Raises StorageError when the store cannot be opened; no app is built.
    """
    repository = TaskRepository(open_store(database_url))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        repository.close()

    app = FastAPI(title="Task API", lifespan=lifespan)
    app.state.tasks = repository
    app.include_router(tasks.router)

    # Every error body is {"error": "..."}
    @app.exception_handler(RequestValidationError)
    async def invalid_payload_handler(request: Request, exc: RequestValidationError):
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": "Invalid request payload"})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        # details were logged by the repository
        return JSONResponse(status_code=500, content={"error": "Database error"})

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return app


def run() -> None:
    setup_logging(config.LOG_LEVEL)
    logger.info("Starting Task API...")
    try:
        app = create_app(config.DATABASE_URL)
    except StorageError:
        logger.critical("Error setting up the database", exc_info=True)
        sys.exit(1)

    try:
        uvicorn.run(app, host=config.HOST, port=config.PORT, log_config=None)
    finally:
        app.state.tasks.close()
