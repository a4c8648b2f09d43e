import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from todo_service.common.api_key import get_api_key
from todo_service.common.exceptions import (
    InvalidArgumentException,
    ResourceNotFoundException,
    internal_error_response,
    invalid_argument_handler,
    resource_not_found_handler,
    unexpected_exception_handler,
    validation_error_response,
    validation_exception_handler,
)
from todo_service.common.opentelemetry import setup_opentelemetry
from todo_service.common.rate_limiter import setup_rate_limiter
from todo_service.config import get_settings
from todo_service.healthcheck.router import router as health_router
from todo_service.tasks.router import router as tasks_router
from todo_service.tasks.store import TaskStore

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.task_store = TaskStore()
    logger.info("Task store ready")
    yield
    logger.info(f"Shutting down with {app.state.task_store.count()} tasks in memory")
    del app.state.task_store


app = FastAPI(
    title=settings.API_NAME,
    summary=settings.API_SUMMARY,
    dependencies=[Depends(get_api_key)],
    lifespan=lifespan,
    responses={
        **internal_error_response,
        **validation_error_response,
    },
    version=settings.API_VERSION,
)

if settings.OTEL_ENABLED:
    setup_opentelemetry(settings.OTEL_SERVICE_NAME, app)

if settings.RATE_LIMIT_ENABLED:
    setup_rate_limiter(app, settings.RATE_LIMIT, settings.RATE_LIMIT_STORAGE_URI)

if settings.CORS_ENABLED:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.exception_handler(RequestValidationError)(validation_exception_handler)
app.exception_handler(ResourceNotFoundException)(resource_not_found_handler)
app.exception_handler(InvalidArgumentException)(invalid_argument_handler)
app.exception_handler(Exception)(unexpected_exception_handler)


app.include_router(health_router)
app.include_router(tasks_router)
