"""
Compensation Service - Main Application.

Manages employee salary records:
- Create an employee with a name and salary
- Read an employee's current salary
- Raise a salary by a percentage, returning the previous salary
"""

from contextlib import asynccontextmanager
from typing import Optional, Tuple

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import Settings, settings
from app.database import DatabaseManager
from app.dependencies import set_compensation_service
from app.domain.exceptions import CompensationServiceException, ErrorKind
from app.logging_config import configure_logging
from app.metrics import track_request_metrics
from app.metrics_middleware import PrometheusMiddleware
from app.repositories.compensation_repository import ICompensationRepository
from app.repositories.memory_repository import InMemoryCompensationRepository
from app.repositories.postgres_repository import PostgresCompensationRepository
from app.routers import employee_router, health_router
from app.services.compensation_service import CompensationService

configure_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

logger = structlog.get_logger(__name__)

# Client-visible status for each failure kind
ERROR_STATUS_CODES = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.OVERFLOW: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNDERFLOW: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_RESULT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.STORAGE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def create_repository(
    config: Settings,
) -> Tuple[ICompensationRepository, Optional[DatabaseManager]]:
    """
    Create the repository selected by STORAGE_BACKEND.

    Returns:
        Tuple of (repository, database manager or None for in-memory storage)
    """
    if config.STORAGE_BACKEND == "memory":
        return InMemoryCompensationRepository(), None

    db_manager = DatabaseManager.from_settings(config)
    return PostgresCompensationRepository(db_manager), db_manager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Compensation Service", backend=settings.STORAGE_BACKEND)

    repository, db_manager = create_repository(settings)
    try:
        if db_manager is not None:
            await db_manager.connect()

        service = CompensationService(repository)
        await service.initialize(clear=settings.CLEAR_DB_ON_STARTUP)
        set_compensation_service(service)

        logger.info("Compensation Service started")

        yield

        logger.info("Shutting down Compensation Service")
    finally:
        set_compensation_service(None)
        if db_manager is not None:
            await db_manager.disconnect()
        logger.info("Compensation Service stopped")


app = FastAPI(
    title="Compensation Service",
    description="Employee salary records with atomic percentage raises",
    version="1.0.0",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

app.add_middleware(PrometheusMiddleware, track_func=track_request_metrics)


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Bind a request ID into the log context and echo it back."""
    request_id = request.headers.get("X-Request-ID", f"req-{id(request)}")

    structlog.contextvars.bind_contextvars(request_id=request_id)
    try:
        response = await call_next(request)
    finally:
        structlog.contextvars.clear_contextvars()

    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(CompensationServiceException)
async def compensation_exception_handler(request: Request, exc: CompensationServiceException):
    """Map domain failures to distinct client-visible status codes."""
    status_code = ERROR_STATUS_CODES[exc.kind]
    log = logger.error if status_code >= 500 else logger.info
    log(
        "Request failed",
        path=request.url.path,
        error_kind=exc.kind.value,
        error=exc.message,
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error_code": exc.kind.value},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed query parameters as invalid input."""
    errors = exc.errors()
    detail = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in errors
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": detail, "error_code": ErrorKind.INVALID_INPUT.value},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions."""
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred", "error_code": "internal_error"},
    )


app.include_router(employee_router.router)
app.include_router(health_router.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.SERVICE_HOST,
        port=settings.SERVICE_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
