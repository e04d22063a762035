import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from taskzen import config
from taskzen.errors import TaskServiceError
from taskzen.logging_setup import setup_logging
from taskzen.routers import tasks, users
from taskzen.services.task_service import TaskService
from taskzen.store import DocumentStore

logger = logging.getLogger(__name__)


def create_app(store: DocumentStore = None) -> FastAPI:
    """Build the app around `store`, or a store on config.DATABASE_URL."""
    if store is None:
        store = DocumentStore.from_url(config.DATABASE_URL)

    app = FastAPI(title=f"{config.SERVICE_NAME} task service")
    app.state.task_service = TaskService(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(users.router)
    app.include_router(tasks.router)

    @app.get("/", response_class=PlainTextResponse)
    async def liveness():
        return f"{config.SERVICE_NAME} is running"

    @app.exception_handler(TaskServiceError)
    async def task_service_error_handler(request: Request, exc: TaskServiceError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    # Generic error handler to return JSON errors for unexpected exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    logger.info("%s ready", config.SERVICE_NAME)
    return app


setup_logging(config.LOG_LEVEL)
app = create_app()
