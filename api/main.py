from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from common.core.config import settings
from common.core.telemetry import _initialize_telemetry, get_logger
from common.providers.document_store.factory import (
    close_document_store,
    init_document_store,
)
from api.routes.router import api_router

# Telemetry must be set up before anything logs
_initialize_telemetry()

logger = get_logger(__name__)


def _warn_on_missing_credentials() -> None:
    if not settings.provider_access_token:
        logger.warning(
            "PROVIDER_ACCESS_TOKEN is not set; payments cannot be verified"
        )
    if not settings.webhook_shared_secret:
        logger.warning(
            "WEBHOOK_SHARED_SECRET is not set; webhook accepts calls from any origin"
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting application...")
    _warn_on_missing_credentials()
    init_document_store()
    logger.info("Document store initialized")
    yield
    # Shutdown
    logger.info("Shutting down application...")
    await close_document_store()


docs_url = "/docs" if settings.docs_enabled else None
redoc_url = "/redoc" if settings.docs_enabled else None
openapi_url = "/openapi.json" if settings.docs_enabled else None

app = FastAPI(
    title=settings.app_name,
    version=settings.api_version,
    lifespan=lifespan,
    docs_url=docs_url,
    redoc_url=redoc_url,
    openapi_url=openapi_url,
)

# Instrument FastAPI with OpenTelemetry
FastAPIInstrumentor.instrument_app(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


def run() -> None:
    """Serve the app with uvicorn on settings.host:settings.port."""
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
