"""FastAPI application for Lawvely.

Serves the JSON API used by the browser client: legislation listing,
search and category filters, plus per-user preferences and saved
legislation.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from lawvely.auth.middleware import AuthMiddleware
from lawvely.auth.provider import AuthProvider, MockAuthProvider
from lawvely.classification.classifier import CategoryClassifier
from lawvely.core.config import Settings
from lawvely.core.types import HealthStatus
from lawvely.db.engine import DatabaseManager
from lawvely.legislation.pipeline import LegislationPipeline
from lawvely.legislation.store import LegislationStore, PreferenceStore
from lawvely.llm.client import LLMClient, create_llm_client
from lawvely.llm.health import check_llm_health
from lawvely.sources.fetch import LegislationFetcher
from lawvely.summarization.dates import DateExtractor
from lawvely.summarization.summary import SummaryGenerator
from lawvely.web.legislation_router import router as legislation_router
from lawvely.web.user_router import router as user_router


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str = "0.1.0"


def create_app(
    settings: Settings | None = None,
    llm_client: LLMClient | None = None,
    legislation_store: Any | None = None,
    preference_store: Any | None = None,
    auth_provider: AuthProvider | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Uses the factory pattern so tests can create isolated app instances
    with mock dependencies. When ``settings.db.database_url`` is set and no
    stores are passed in, SQL repositories are used; otherwise in-memory
    stores.

    Returns:
        A configured FastAPI instance.
    """
    if settings is None:
        settings = Settings()

    db_manager: DatabaseManager | None = None
    if settings.db.database_url and (legislation_store is None or preference_store is None):
        from lawvely.repositories.sql.legislation import SqlLegislationRepository
        from lawvely.repositories.sql.preferences import SqlPreferenceRepository

        db_manager = DatabaseManager.from_config(settings.db)
        if legislation_store is None:
            legislation_store = SqlLegislationRepository(db_manager)
        if preference_store is None:
            preference_store = SqlPreferenceRepository(db_manager)

    if legislation_store is None:
        legislation_store = LegislationStore()
    if preference_store is None:
        preference_store = PreferenceStore()
    if llm_client is None:
        llm_client = create_llm_client(settings.llm)
    if auth_provider is None:
        auth_provider = MockAuthProvider(
            fixtures_path=settings.auth.fixtures_path,
            token_expiry_minutes=settings.auth.token_expiry_minutes,
        )

    classifier = CategoryClassifier(llm_client)
    fetcher = LegislationFetcher(settings.source)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if db_manager is not None:
            await db_manager.create_all()
        try:
            yield
        finally:
            await llm_client.close()
            await fetcher.close()
            if db_manager is not None:
                await db_manager.close()

    app = FastAPI(
        title="Lawvely",
        description="Plain-language summaries of legislation",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(AuthMiddleware)

    # Store on app state for access in route handlers
    app.state.settings = settings
    app.state.llm_client = llm_client
    app.state.classifier = classifier
    app.state.pipeline = LegislationPipeline(
        fetcher=fetcher,
        summaries=SummaryGenerator(llm_client),
        classifier=classifier,
        dates=DateExtractor(llm_client),
        store=legislation_store,
    )
    app.state.legislation_store = legislation_store
    app.state.preference_store = preference_store
    app.state.auth_provider = auth_provider
    if db_manager is not None:
        app.state.db_manager = db_manager

    app.include_router(legislation_router)
    app.include_router(user_router)

    @app.get("/api/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", service="lawvely")

    @app.get("/api/health/llm", response_model=HealthStatus)
    async def llm_health(request: Request) -> HealthStatus:
        """Probe the configured language-model backend."""
        return await check_llm_health(settings.llm, request.app.state.llm_client)

    return app
