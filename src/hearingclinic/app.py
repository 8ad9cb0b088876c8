"""
FastAPI application factory and main app configuration.
"""

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.routers import health, patients
from .api.utils.responses import fail
from .core.config import get_settings
from .core.exceptions import ExternalServiceError, StorageError
from .core.structured_logger import configure_logging
from .domain.errors import ConflictError, DomainError, NotFoundError, ValidationError

DOMAIN_ERROR_STATUS = (
    (ValidationError, 422),
    (NotFoundError, 404),
    (ConflictError, 409),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    logger = logging.getLogger("hearingclinic")
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.app_env}")
    yield
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.logging)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Patient records and hearing test classification for hearing clinics",
        debug=settings.debug,
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request.state.request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        response = await call_next(request)
        response.headers["X-Request-ID"] = request.state.request_id
        return response

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger = logging.getLogger("hearingclinic")
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
        return response

    app.include_router(health.router)
    app.include_router(patients.router)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        status_code = 400
        for error_type, error_status in DOMAIN_ERROR_STATUS:
            if isinstance(exc, error_type):
                status_code = error_status
                break
        logging.getLogger("hearingclinic").info(
            f"DomainError: {exc.error_code} ({status_code}) {exc.message}"
        )
        return JSONResponse(
            status_code=status_code,
            content=fail(request, exc.error_code or "DOMAIN_ERROR", exc.message, exc.details).model_dump(),
        )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logging.getLogger("hearingclinic").error(f"StorageError: {exc.message}")
        return JSONResponse(
            status_code=503,
            content=fail(request, exc.error_code, exc.message, exc.details).model_dump(),
        )

    @app.exception_handler(ExternalServiceError)
    async def external_service_error_handler(request: Request, exc: ExternalServiceError):
        logging.getLogger("hearingclinic").error(f"ExternalServiceError: {exc.message}")
        return JSONResponse(
            status_code=502,
            content=fail(request, exc.error_code, exc.message, exc.details).model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=422,
            content=fail(
                request, "INVALID_INPUT", "Request validation failed", {"errors": errors}
            ).model_dump(),
        )

    return app


app = create_app()
