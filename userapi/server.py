"""FastAPI server for the user management API."""

import logging
from typing import Optional, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import router as api_router
from .config import Settings
from .logging_config import setup_logging
from .models.domain import SEED_USERS
from .models.dto import ErrorResponse
from .pipeline import RequestPipeline, Stage, default_stages
from .repositories.user_repository import UserRepository
from .services.user_service import UserService

logger = logging.getLogger(__name__)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ``{"error": ...}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are client errors, reported like validation failures."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error="Invalid request body").model_dump(),
    )


def create_app(
    settings: Optional[Settings] = None,
    user_repo: Optional[UserRepository] = None,
    stages: Optional[Sequence[Stage]] = None,
) -> FastAPI:
    """Build the application.

    This is the composition root: it owns the repository and the
    service, and decides the order of the request pipeline.

    Args:
        settings: Settings to use. Defaults to ``Settings.from_env()``.
        user_repo: Repository to serve. Defaults to one seeded with
            ``SEED_USERS``.
        stages: Pipeline stages, outermost first. Defaults to
            recovery, authentication, logging.
    """
    if settings is None:
        settings = Settings.from_env()
    setup_logging(settings.log_level)

    if user_repo is None:
        user_repo = UserRepository(seed=SEED_USERS)
    if stages is None:
        stages = default_stages(
            settings.auth_token, expose_details=settings.is_development
        )

    app = FastAPI(
        title="User Management API",
        description="In-memory user records with validation and a shared-secret gate",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.user_service = UserService(user_repo)

    app.add_middleware(RequestPipeline, stages=stages)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(api_router)

    @app.get("/", response_class=PlainTextResponse)
    async def index():
        """Welcome text."""
        return "User Management API"

    @app.get("/error")
    async def trigger_error():
        """Always fails; exercises the recovery stage."""
        raise RuntimeError("Test exception")

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "ok"}

    logger.info(
        "User API ready with %d seed users (%s mode)",
        user_repo.count(), settings.environment,
    )
    return app


app = create_app()
