"""FastAPI application factory.

Creates the app with logging middleware, metrics middleware, CORS, Sentry,
central exception handlers, lifespan events for database initialization,
and the /api router.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from src.fundrazor.api.middleware import LoggingMiddleware, register_exception_handlers
from src.fundrazor.api.middleware.logging import configure_structlog
from src.fundrazor.api.routes.router import router as api_router
from src.fundrazor.campaigns.repository import CampaignRepository
from src.fundrazor.campaigns.service import CampaignService
from src.fundrazor.canvases.repository import CanvasRepository
from src.fundrazor.canvases.service import CanvasService
from src.fundrazor.config import get_settings
from src.fundrazor.core.database import close_db, get_session, init_db
from src.fundrazor.core.monitoring import MetricsMiddleware, get_metrics_response, init_sentry
from src.fundrazor.data_health.repository import DataHealthRepository
from src.fundrazor.data_health.service import DataHealthService
from src.fundrazor.interactions.repository import InteractionRepository
from src.fundrazor.interactions.service import InteractionService
from src.fundrazor.people.repository import PeopleRepository
from src.fundrazor.people.service import OpportunityService, PersonService
from src.fundrazor.users.repository import UserRepository
from src.fundrazor.users.service import AuthService


def init_services(app: FastAPI) -> None:
    """Build repositories and services and store them on app.state."""
    settings = get_settings()

    user_repository = UserRepository(session_factory=get_session)
    app.state.user_repository = user_repository
    app.state.auth_service = AuthService(user_repository)

    people_repository = PeopleRepository(session_factory=get_session)
    app.state.person_service = PersonService(people_repository)
    app.state.opportunity_service = OpportunityService(people_repository)

    app.state.campaign_service = CampaignService(CampaignRepository(session_factory=get_session))
    app.state.interaction_service = InteractionService(
        InteractionRepository(session_factory=get_session)
    )
    app.state.canvas_service = CanvasService(CanvasRepository(session_factory=get_session))
    app.state.data_health_service = DataHealthService(
        DataHealthRepository(session_factory=get_session),
        freshness_window_days=settings.DATA_FRESHNESS_WINDOW_DAYS,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: init DB and Sentry on startup, close on shutdown."""
    log = structlog.get_logger(__name__)
    settings = get_settings()
    configure_structlog()
    await init_db()

    if settings.SENTRY_DSN:
        init_sentry(dsn=settings.SENTRY_DSN, environment=settings.ENVIRONMENT.value)

    init_services(app)
    log.info("app.started", environment=settings.ENVIRONMENT.value)

    yield

    await close_db()
    log.info("app.stopped")


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="FundRazor API",
        description="Donor management: campaigns, interactions, org canvases and data health",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Middleware order matters: last added = first executed
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(LoggingMiddleware)
    origins = settings.get_cors_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        return get_metrics_response()

    return app


app = create_app()
