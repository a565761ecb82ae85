"""FastAPI application entrypoint. No business logic; only wiring, startup and error mapping."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1 import router as v1_router
from app.core.config import Settings, get_settings
from app.core.database import Database, StoreError
from app.core.security import hash_password
from app.models import Category, Product
from app.services.credential_store import CredentialStore
from app.services.resource_store import ResourceStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the database and stores, seed the admin account, tear down on exit."""
    settings: Settings = app.state.settings
    db = Database(settings.DATABASE_URL, echo=settings.DEBUG)
    db.create_all()
    app.state.db = db
    app.state.credentials = CredentialStore(db)
    app.state.categories = ResourceStore(db, Category)
    app.state.products = ResourceStore(db, Product)

    if settings.SEED_ADMIN:
        app.state.credentials.seed_admin(
            hash_password(
                settings.ADMIN_DEFAULT_PASSWORD.get_secret_value(),
                rounds=settings.BCRYPT_ROUNDS,
            )
        )
    if settings.uses_default_jwt_secret:
        logger.warning("JWT_SECRET is the built-in default; set it before exposing the service")
    logger.info("Catalog API started (env=%s, database=%s)", settings.APP_ENV, settings.DATABASE_URL)

    yield

    db.dispose()
    logger.info("Catalog API shutdown complete")


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Database failures surface as 500 with the driver's message."""
    return JSONResponse(status_code=500, content={"error": exc.message})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application; tests pass their own Settings for isolation."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Catalog API",
        version="0.1.0",
        docs_url="/api-docs",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StoreError, store_error_handler)
    app.include_router(v1_router, prefix=settings.API_PREFIX)
    return app


configure_logging(get_settings())
app = create_app()
