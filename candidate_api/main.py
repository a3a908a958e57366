"""FastAPI application entry point.

Configures CORS, structured logging, error handlers, the lifespan startup
connectivity check, and router registration.

The storage gateway is built once at startup and kept on ``app.state``;
handlers receive it through ``Depends(get_gateway)``.  ``create_app`` accepts
a ready-made gateway so tests can substitute their own.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from candidate_api.api.error_handlers import register_error_handlers
from candidate_api.core.config import settings
from candidate_api.core.logging import setup_logging
from candidate_api.db.gateway import CandidateGateway, SupabaseGateway
from candidate_api.db.supabase import get_supabase
from candidate_api.routers import candidates, health, parties

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: connect to the database before serving.

    A failed probe aborts startup.
    """
    setup_logging()
    if application.state.gateway is None:
        application.state.gateway = SupabaseGateway(get_supabase())
    application.state.gateway.ping()
    logger.info("Database connected.")
    logger.info("Server running on port %s", settings.PORT)
    yield
    logger.info("Application shutting down")


def _parse_origins(raw: str) -> list[str]:
    raw = raw.strip()
    if raw == "*":
        return ["*"]
    return [o.strip() for o in raw.split(",") if o.strip()]


def create_app(gateway: CandidateGateway | None = None) -> FastAPI:
    """Build the application, optionally around an existing gateway."""
    application = FastAPI(
        title="Candidates API",
        description="CRUD API over candidates, joined with their parties",
        version="0.1.0",
        lifespan=lifespan,
    )
    application.state.gateway = gateway

    application.add_middleware(
        CORSMiddleware,
        allow_origins=_parse_origins(settings.ALLOWED_ORIGINS),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)

    # -----------------------------------------------------------------------
    # Router Registration
    # -----------------------------------------------------------------------
    application.include_router(health.router, tags=["Health"])
    application.include_router(
        candidates.router, prefix=settings.API_PREFIX, tags=["Candidates"]
    )
    application.include_router(
        parties.router, prefix=settings.API_PREFIX, tags=["Parties"]
    )
    return application


app = create_app()


def run() -> None:
    """Serve ``app`` with uvicorn on the configured host and port."""
    uvicorn.run(
        "candidate_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )
