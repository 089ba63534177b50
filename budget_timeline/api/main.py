"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from budget_timeline.api.middleware import RequestIDMiddleware, MetricsMiddleware
from budget_timeline.api.v1 import timeline, summary, export
from budget_timeline.infrastructure.observability.logging import setup_logging
from budget_timeline.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="BudgetAI Payment Timeline",
        description="Recurring payment and installment timeline service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(timeline.router, prefix="/v1", tags=["timeline"])
    app.include_router(summary.router, prefix="/v1", tags=["commitments"])
    app.include_router(export.router, prefix="/v1", tags=["export"])

    return app


app = create_app()
