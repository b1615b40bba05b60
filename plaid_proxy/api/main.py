"""FastAPI application factory"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from plaid_proxy.api.middleware import MetricsMiddleware, RequestIDMiddleware
from plaid_proxy.api.v1 import exchange, link, transactions
from plaid_proxy.api.v1.schemas import HealthResponse
from plaid_proxy.config import Settings, settings as default_settings
from plaid_proxy.domain.exceptions import MissingFieldError
from plaid_proxy.infrastructure.clients.plaid import PlaidClient
from plaid_proxy.infrastructure.observability.logging import setup_logging

# Setup structured logging
setup_logging(default_settings.log_level, default_settings.service_name)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open a Plaid client per startup unless one was injected; close only our own"""
    owned = app.state.plaid_client is None
    if owned:
        app.state.plaid_client = PlaidClient(app.state.settings)
    try:
        yield
    finally:
        if owned:
            await app.state.plaid_client.aclose()
            app.state.plaid_client = None


def create_app(settings: Optional[Settings] = None, plaid_client: Optional[PlaidClient] = None) -> FastAPI:
    """Create and configure FastAPI application"""
    settings = settings or default_settings

    app = FastAPI(
        title="Plaid Link Proxy",
        description="Backend-for-frontend for Plaid Link and transactions",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    # Injected clients belong to the caller
    app.state.plaid_client = plaid_client

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(MissingFieldError)
    async def missing_field_handler(request: Request, exc: MissingFieldError):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    # Health check endpoint
    @app.get("/health", response_model=HealthResponse)
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(link.router, prefix="/api", tags=["link"])
    app.include_router(exchange.router, prefix="/api", tags=["link"])
    app.include_router(transactions.router, prefix="/api", tags=["transactions"])

    return app


app = create_app()
