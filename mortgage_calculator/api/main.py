"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from mortgage_calculator.api.errors import register_exception_handlers
from mortgage_calculator.api.middleware import AccessLogMiddleware, MetricsMiddleware, RequestIDMiddleware
from mortgage_calculator.api.routes import cache, execute
from mortgage_calculator.api.schemas import HealthResponse
from mortgage_calculator.domain.calculator import MortgageCalculator
from mortgage_calculator.infrastructure.cache.result_store import InMemoryResultStore
from mortgage_calculator.infrastructure.observability.logging import setup_logging
from mortgage_calculator.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app(
    calculator: MortgageCalculator | None = None,
    result_store: InMemoryResultStore | None = None,
) -> FastAPI:
    """Create and configure FastAPI application with its own calculator and store"""
    app = FastAPI(
        title="Mortgage Calculator",
        description="Annuity mortgage calculation service with in-memory result cache",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    if calculator is None:
        calculator = MortgageCalculator(min_initial_payment_ratio=settings.min_initial_payment_ratio)
    if result_store is None:
        result_store = InMemoryResultStore()

    app.state.calculator = calculator
    app.state.result_store = result_store

    register_exception_handlers(app)

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health", response_model=HealthResponse)
    def health_check():
        return HealthResponse(
            status="ok",
            service=settings.service_name,
            cached_calculations=len(app.state.result_store),
        )

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers; paths stay unprefixed for existing clients
    app.include_router(execute.router, tags=["calculations"])
    app.include_router(cache.router, tags=["cache"])

    return app


app = create_app()
