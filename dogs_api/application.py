"""
Application factory.
Builds a configured FastAPI app with request logging, error envelopes and health checks.
"""
from fastapi import APIRouter, FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import SQLAlchemyError
import time
import uuid
from contextlib import asynccontextmanager
from typing import Iterable, Optional
from dogs_api.api import api_router
from dogs_api.config import Settings, load_settings
from dogs_api.database import Base, create_db_engine, create_session_factory, check_connection
from dogs_api.exceptions import PersistenceError, SetupError
from dogs_api.utils import setup_logging, get_logger

import dogs_api.models.db  # noqa: F401  registers every table on Base.metadata

SERVICE_NAME = "dogs-api"
VERSION = "1.0.0"

# Echoed back on every response; generated when the caller sends none
REQUEST_ID_HEADER = "X-Request-ID"

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Synchronizes the schema on startup and disposes the engine on shutdown.
    """
    settings: Settings = app.state.settings
    engine = app.state.engine

    logger.info("Application startup initiated")
    try:
        if settings.db_synchronize:
            logger.info("Synchronizing database schema")
            Base.metadata.create_all(bind=engine)
            logger.info("Database schema synchronized", tables=sorted(Base.metadata.tables))
        else:
            check_connection(engine)
    except SQLAlchemyError as e:
        logger.error("Application startup failed", error=str(e), exc_info=True)
        raise SetupError(f"Database initialization failed: {e}") from e
    logger.info("Application startup completed successfully")

    try:
        yield
    finally:
        logger.info("Application shutdown initiated")
        engine.dispose()
        logger.info("Application shutdown completed")


def _error_response(request: Request, status_code: int, message, details=None) -> JSONResponse:
    content = {
        "success": False,
        "message": message,
        "request_id": getattr(request.state, "request_id", "unknown"),
    }
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def register_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def add_request_context_and_logging(request: Request, call_next):
        """
        Add request ID, timing, and request/response logging.
        """
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.time()

        logger.info(
            "Request started",
            method=request.method,
            url=str(request.url),
            user_agent=request.headers.get("User-Agent"),
            remote_addr=request.client.host if request.client else "unknown",
            request_id=request_id
        )

        response = await call_next(request)

        process_time = time.time() - start_time
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = str(round(process_time * 1000, 2))

        logger.info(
            "Request completed",
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
            process_time_ms=round(process_time * 1000, 2),
            request_id=request_id
        )

        return response


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Malformed or mistyped payloads are a 400; nothing reaches the service."""
        logger.warning(
            "Request validation failed",
            errors=exc.errors(),
            request_id=getattr(request.state, "request_id", None),
            url=str(request.url),
            method=request.method
        )
        return _error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            "Request validation failed",
            details=exc.errors(),
        )

    @app.exception_handler(PersistenceError)
    async def persistence_exception_handler(request: Request, exc: PersistenceError):
        logger.error(
            "Persistence failure",
            error=exc.message,
            operation=exc.operation,
            table=exc.table,
            cause=repr(exc.__cause__) if exc.__cause__ else None,
            request_id=getattr(request.state, "request_id", None),
            url=str(request.url),
            method=request.method
        )
        return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Persistence failure")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions."""
        logger.warning(
            "HTTP exception",
            status_code=exc.status_code,
            detail=exc.detail,
            request_id=getattr(request.state, "request_id", None),
            url=str(request.url),
            method=request.method
        )
        return _error_response(request, exc.status_code, exc.detail)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(
            "Unhandled exception",
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=getattr(request.state, "request_id", None),
            url=str(request.url),
            method=request.method,
            exc_info=True
        )
        return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_health_routes(app: FastAPI) -> None:
    @app.get("/health", tags=["health"], summary="Basic health check")
    async def health_check():
        """Basic health check endpoint for load balancers."""
        return {
            "status": "healthy",
            "service": SERVICE_NAME,
            "version": VERSION,
            "timestamp": time.time(),
        }

    @app.get("/health/detailed", tags=["health"], summary="Detailed health check")
    def detailed_health_check(request: Request):
        """Health check including a database round trip."""
        health_status = {
            "status": "healthy",
            "service": SERVICE_NAME,
            "version": VERSION,
            "timestamp": time.time(),
            "checks": {}
        }
        try:
            check_connection(request.app.state.engine)
            health_status["checks"]["database"] = "healthy"
        except SQLAlchemyError as e:
            health_status["checks"]["database"] = f"unhealthy: {e}"
            health_status["status"] = "degraded"
        return health_status


def create_app(
    settings: Optional[Settings] = None,
    routers: Optional[Iterable[APIRouter]] = None,
) -> FastAPI:
    """
    Build a configured application.

    Args:
        settings: Loaded once from ``.env`` when not supplied.
        routers: Feature routers to mount; defaults to every router in ``dogs_api.api``.

    Returns:
        FastAPI: Application with its engine and session factory on ``app.state``.
    """
    if settings is None:
        settings = load_settings()

    setup_logging(
        log_level=settings.log_level,
        log_file=settings.log_file or None,
        enable_console=True
    )

    app = FastAPI(
        title="Dogs API",
        description="Create and store dogs.",
        version=VERSION,
        lifespan=lifespan,
    )

    engine = create_db_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    register_middleware(app)
    register_exception_handlers(app)
    register_health_routes(app)

    for router in (routers if routers is not None else [api_router]):
        app.include_router(router)

    return app

