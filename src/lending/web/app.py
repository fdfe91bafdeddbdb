"""FastAPI application for the lending site.

Serves the loan application wizard API and the read-only page content the
front end renders.

Run with::

    uvicorn lending.web.app:create_app --factory --port 8080
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from lending.content.store import ContentStore
from lending.core.config import Settings
from lending.intake.client import SubmissionClient
from lending.intake.engine import Submitter, WizardEngine
from lending.intake.store import IntakeStore
from lending.intake.validation import ValidationEngine
from lending.web.apply_router import router as apply_router
from lending.web.content_router import router as content_router

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str = "0.1.0"


def create_app(
    settings: Settings | None = None,
    submission_client: Submitter | None = None,
    content_store: ContentStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Uses the factory pattern so tests can create isolated app instances
    with a fake submission client.

    Args:
        settings: Application settings. Defaults to Settings().
        submission_client: Optional pre-built client for the loan-origination
            system. When omitted an httpx-backed SubmissionClient is created
            and closed on shutdown.
        content_store: Optional pre-built ContentStore.

    Returns:
        A configured FastAPI instance.
    """
    if settings is None:
        settings = Settings()

    logging.getLogger("lending").setLevel(settings.log_level.upper())

    owned_client: SubmissionClient | None = None
    if submission_client is None:
        owned_client = SubmissionClient(config=settings.los)
        submission_client = owned_client

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        yield
        if owned_client is not None:
            await owned_client.close()

    app = FastAPI(
        title="Lending Site",
        description="Loan application intake and page content API",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # CORS for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    intake_store = IntakeStore()
    validation_engine = ValidationEngine()
    wizard_engine = WizardEngine(
        store=intake_store,
        validation_engine=validation_engine,
        client=submission_client,
        los_config=settings.los,
    )

    if content_store is None:
        content_store = ContentStore(settings.content.content_path)

    # Store on app state for access in route handlers
    app.state.settings = settings
    app.state.intake_store = intake_store
    app.state.validation_engine = validation_engine
    app.state.wizard_engine = wizard_engine
    app.state.content_store = content_store

    app.include_router(apply_router)
    app.include_router(content_router)

    @app.get("/api/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", service="lending")

    logger.info(
        "Lending app created (environment=%s, los=%s)",
        settings.environment, settings.los.base_url,
    )
    return app
