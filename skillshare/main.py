"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from skillshare.config import Settings, configure_logging, get_settings
from skillshare.core import container
from skillshare.database import dispose_engine, initialize_database, session_scope
from skillshare.domain.common.exceptions import DomainError
from skillshare.exceptions import SkillshareError
from skillshare.infrastructure.identity.routers import users
from skillshare.infrastructure.planning.routers import learning_plans, templates

logger = structlog.get_logger(__name__)


def seed_templates(settings: Settings) -> None:
    """Install the predefined templates under the system user."""
    with session_scope(settings) as session:
        with container.db.override(session):
            use_case = container.seed_templates_use_case()
        created = use_case.seed(settings.SYSTEM_USER_EMAIL)
    logger.info("template_seeding_finished", created=len(created))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()
    configure_logging(settings)
    initialize_database(settings)
    logger.info("starting_application", environment=settings.ENVIRONMENT, version=settings.VERSION)
    if settings.SEED_TEMPLATES:
        seed_templates(settings)
    yield
    dispose_engine()
    logger.info("application_stopped")


async def skillshare_error_handler(request: Request, exc: SkillshareError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.warning("domain_rule_rejected", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = get_settings()
    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(SkillshareError, skillshare_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]

    app.include_router(learning_plans.router, prefix=settings.API_V1_PREFIX)
    app.include_router(templates.router, prefix=settings.API_V1_PREFIX)
    app.include_router(users.router, prefix=settings.API_V1_PREFIX)

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_app()
