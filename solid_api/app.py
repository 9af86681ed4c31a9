from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from solid_api.core.config import get_settings
from solid_api.core.logging import configure_logging
from solid_api.db.create_tables import create_all
from solid_api.repositories.sql_repository import SQLPersonRepository
from solid_api.routers import persons as persons_router
from solid_api.services.person_service import PersonService

logger = structlog.get_logger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (CSP, anti clickjacking, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("Content-Security-Policy", "default-src 'none'; frame-ancestors 'none'")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


async def _storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("storage_failure", path=request.url.path, error=str(exc))
    return JSONResponse({"detail": "Storage unavailable"}, status_code=503)


def create_app(person_service: Optional[PersonService] = None) -> FastAPI:
    """Build the API; a PersonService can be injected (tests, alternative storage)."""
    settings = get_settings()
    configure_logging(level=settings.log_level, log_json=settings.log_json)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        if settings.auto_create_tables:
            create_all()
        logger.info("app_started", env=settings.app_env)
        yield

    application = FastAPI(title="SOLID Example API", lifespan=lifespan)
    application.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
    application.add_exception_handler(SQLAlchemyError, _storage_error_handler)

    application.state.person_service = person_service or PersonService(SQLPersonRepository())
    application.include_router(persons_router.router)
    return application


app = create_app()
