"""
Rice Order API - Main FastAPI Application.

REST API layer for managing food-delivery rice orders, backed by an
in-memory repository.
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
import logging
import time

from api.dependencies import get_order_repository
from api.responses import error_response
from api.routes import health, orders
from core.application.dtos.order_dto import format_validation_errors
from core.infrastructure.logging import configure_logging
from core.settings import get_app_settings


settings = get_app_settings()

# Setup logging
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

app = FastAPI(
    title=settings.app_name,
    description="""
    Rice order management API.

    Features:
    - Create single orders or batches
    - Full and partial updates
    - Filter by status or customer
    - Totals computed from order items
    """,
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)


# =============================================================================
# CORS MIDDLEWARE
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log each request and how long the handler took."""
    started = time.perf_counter()
    logger.info(f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.perf_counter() - started
    logger.info(
        f"← {request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )

    return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies become a 400 envelope."""
    message = format_validation_errors(exc.errors())
    logger.warning(f"Invalid request to {request.url.path}: {message}")
    return error_response(f"Invalid request: {message}", status.HTTP_400_BAD_REQUEST)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return error_response(
        f"Internal server error: {exc}", status.HTTP_500_INTERNAL_SERVER_ERROR
    )


# =============================================================================
# STARTUP/SHUTDOWN EVENTS
# =============================================================================

@app.on_event("startup")
async def startup_event():
    """Run on application startup."""
    logger.info(f"🚀 {settings.app_name} starting up...")
    repository = get_order_repository()
    logger.info(f"Repository ready with {repository.count()} order(s)")
    logger.info(f"Orders API mounted at /api/v1/orders (docs: {app.docs_url})")


@app.on_event("shutdown")
async def shutdown_event():
    """Run on application shutdown."""
    logger.info(f"👋 {settings.app_name} shutting down...")


# =============================================================================
# INCLUDE ROUTERS
# =============================================================================

app.include_router(
    health.router,
    tags=["Health"]
)

app.include_router(
    orders.router,
    prefix="/api/v1/orders",
    tags=["Orders"]
)


# =============================================================================
# ROOT ENDPOINT
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """API root endpoint."""
    return {
        "message": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "health": "/health"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
