"""
Transaction Dashboard API - Main Application.

FastAPI application with CORS enabled for frontend communication.

The application owns a single TransactionStore. On startup the store is
seeded from the product transaction feed on a background thread; the server
accepts requests immediately, so early requests may see an empty store.
`GET /health` reports the seed status.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import __version__
from api.config import Settings
from api.dependencies import get_store
from api.models import SeedStatusResponse
from repositories.transaction_store import SeedStatus, TransactionStore
from services.seed_service import start_background_seed

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[TransactionStore] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Application settings (read from the environment if omitted)
        store: Transaction store to serve (a new, empty store if omitted)
    """

    settings = settings or Settings.from_env()
    store = store if store is not None else TransactionStore()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.seed_on_startup and store.status is SeedStatus.PENDING:
            logger.info("Seeding transaction store from %s", settings.seed_url)
            start_background_seed(store, settings.seed_url, timeout=settings.seed_timeout_seconds)
        yield

    app = FastAPI(
        title="Transaction Dashboard API",
        description="Read-only REST API for product transaction statistics and charts",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    allow_all = "*" in settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_origins,
        allow_credentials=not allow_all,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["Health"])
    def health_check(current_store: TransactionStore = Depends(get_store)):
        """
        Health check endpoint.

        Returns the API status, version and the state of the store seed.
        """
        seed = SeedStatusResponse(
            status=current_store.status.value,
            records=len(current_store),
            error=current_store.failure,
        )
        return {
            "status": "healthy",
            "version": __version__,
            "service": "transaction-dashboard-api",
            "seed": seed.model_dump(),
        }

    @app.get("/", tags=["Root"])
    def root():
        """
        Root endpoint with API information.
        """
        return {
            "message": "Transaction Dashboard API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health"
        }

    from api.routers import charts, dashboard, transactions

    app.include_router(transactions.router, prefix="/api", tags=["Transactions"])
    app.include_router(charts.router, prefix="/api", tags=["Charts"])
    app.include_router(dashboard.router, prefix="/api", tags=["Dashboard"])

    return app


app = create_app()
