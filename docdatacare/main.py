"""
DocDataCare - Clinic Patient Records API
Shared validation and storage for patient registration and lookup.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.exceptions import DuplicateUsernameError, StorageError, ValidationError
from .seed_demo import seed_demo_data
from .storage.base import Storage
from .storage.factory import build_storage

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=422, content=exc.to_dict())


async def duplicate_username_handler(request: Request, exc: DuplicateUsernameError):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": "Username already taken"})


async def storage_error_handler(request: Request, exc: StorageError):
    logger.warning("Storage unavailable for %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Patient record storage is unavailable"},
    )


def create_app(storage: Optional[Storage] = None) -> FastAPI:
    """Build the application around a single shared storage instance.

    Tests pass their own ``storage``; otherwise one is built from settings.
    """
    logging.basicConfig(level=settings.LOG_LEVEL)

    if storage is None:
        storage = build_storage(settings)
        # Seed demo users and patients (idempotent)
        if settings.SEED_DEMO_DATA:
            seed_demo_data(storage)

    app = FastAPI(
        title="DocDataCare Patient Records API",
        description="Patient registration, listing and search for a small clinic.",
        version=settings.VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.storage = storage

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(DuplicateUsernameError, duplicate_username_handler)
    app.add_exception_handler(StorageError, storage_error_handler)

    @app.get("/health")
    def health_check():
        return {
            "status": "healthy",
            "service": settings.APP_NAME,
            "version": settings.VERSION,
            "storage": storage.backend_name,
            "patients": storage.count_patients(),
            "users": storage.count_users(),
        }

    return app


app = create_app()
