"""
Health check endpoints.

Used for monitoring and load balancer health checks.
"""
from fastapi import APIRouter, Depends
from datetime import datetime, timezone
import platform

from api.dependencies import get_order_repository
from core.domain.repositories.order_repository import OrderRepository
from core.settings import get_app_settings


router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns system health status.
    """
    settings = get_app_settings()
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": settings.app_name,
        "version": settings.app_version,
        "python_version": platform.python_version(),
    }


@router.get("/health/ready")
async def readiness_check(repository: OrderRepository = Depends(get_order_repository)):
    """
    Readiness check endpoint.

    Returns whether the service is ready to accept traffic.
    """
    return {
        "status": "ready",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": {
            "api": "ok",
            "repository": "ok",
        },
        "order_count": repository.count(),
    }
