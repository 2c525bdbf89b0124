"""
FastAPI application factory.
create_app() is the single entry point for building the app.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.asynchronous.mongo_client import AsyncMongoClient

from config import AppSettings
from errors import register_error_handlers
from infrastructure.email.console import ConsoleEmailProvider
from infrastructure.email.protocol import EmailProvider
from infrastructure.email.zeptomail import ZeptoMailProvider
from infrastructure.http_client import HttpClient
from repositories.indexes import ensure_indexes
from repositories.plan_repository import PlanRepository
from routes.auth_routes import router as auth_router
from routes.booking_routes import router as booking_router
from routes.health_routes import router as health_router
from routes.plan_routes import router as plan_router
from routes.post_routes import router as post_router
from routes.user_routes import router as user_router
from services.plan_service import PlanService
from services.token_service import TokenService
from shared.logging import get_logger, setup_logging

log = get_logger(__name__)


def create_app(
    settings: Optional[AppSettings] = None,
    mongo_client=None,
    email_provider: Optional[EmailProvider] = None,
) -> FastAPI:
    """Create and return a fully configured FastAPI application.

    ``mongo_client`` and ``email_provider`` override the ones built from
    settings; the app never closes a client it did not create.
    """
    if settings is None:
        settings = AppSettings()

    setup_logging(settings.logging)

    # Initialise Sentry before anything else so it captures startup errors
    if settings.sentry.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry.sentry_dsn,
            send_default_pii=settings.sentry.sentry_send_pii,
            traces_sample_rate=settings.sentry.sentry_traces_sample_rate,
            profiles_sample_rate=settings.sentry.sentry_profile_sample_rate,
        )

    # Fail fast on a missing JWT secret rather than on the first sign-in
    token_service = TokenService(settings.jwt)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # ── Startup ──────────────────────────────────────────────────────────
        owns_client = mongo_client is None
        client = (
            AsyncMongoClient(settings.db.mongodb_uri, tz_aware=True)
            if owns_client
            else mongo_client
        )
        app.state.mongo_client = client
        app.state.db = client[settings.db.db_name]
        app.state.settings = settings
        app.state.token_service = token_service

        http_client: Optional[HttpClient] = None
        provider = email_provider
        if provider is None:
            if settings.email.zepto_api_token:
                http_client = HttpClient(timeout=10.0)
                provider = ZeptoMailProvider(
                    settings.email, http_client, app_name=settings.app_name
                )
            else:
                provider = ConsoleEmailProvider()
        app.state.email_provider = provider

        await ensure_indexes(app.state.db)
        if settings.seed_plans:
            await PlanService(PlanRepository(app.state.db)).seed_defaults()

        log.info(
            "app_started",
            env=settings.env,
            db_name=settings.db.db_name,
            email_provider=type(provider).__name__,
        )

        yield

        # ── Shutdown ─────────────────────────────────────────────────────────
        if http_client is not None:
            await http_client.aclose()
        if owns_client:
            await client.close()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url=settings.docs_url,
        redoc_url=None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(user_router)
    app.include_router(plan_router)
    app.include_router(booking_router)
    app.include_router(post_router)

    return app
