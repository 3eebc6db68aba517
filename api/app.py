"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.logging_config import configure_logging
from modules.users.routes import router as users_router, update_router as update_user_router
from modules.companies.routes import router as companies_router, company_router
from modules.clients.routes import router as clients_router
from modules.jobs.routes import router as jobs_router
from modules.billing.routes import router as billing_router

from .errors import register_exception_handlers
from .routes import health, public

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Multi-tenant business management API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(users_router, prefix="/api/users", tags=["users"])
    app.include_router(update_user_router, prefix="/api", tags=["users"])
    app.include_router(companies_router, prefix="/api/companies", tags=["companies"])
    app.include_router(company_router, prefix="/api/company", tags=["companies"])
    app.include_router(clients_router, prefix="/api/client", tags=["clients"])
    app.include_router(jobs_router, prefix="/api/jobs", tags=["jobs"])
    app.include_router(public.router, prefix="/api/public", tags=["public"])
    app.include_router(billing_router, prefix="/api/webhooks", tags=["billing"])

    return app


# Application instance for uvicorn
app = create_app()
