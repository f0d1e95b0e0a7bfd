"""
FastAPI Dependencies.

Provides dependency injection for the repository and services.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from core.settings import get_app_settings
from core.application.services.order_service import OrderApplicationService
from core.domain.repositories.order_repository import OrderRepository
from core.infrastructure.adapters.persistence.in_memory_order_repository import InMemoryOrderRepository
from core.infrastructure.adapters.persistence.sample_orders import seed_sample_orders

logger = logging.getLogger(__name__)


# =============================================================================
# SINGLETON INSTANCES
# =============================================================================

_order_repository: Optional[OrderRepository] = None
_order_service: Optional[OrderApplicationService] = None


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_order_repository() -> OrderRepository:
    global _order_repository
    if _order_repository is None:
        _order_repository = InMemoryOrderRepository()
        logger.info("Created InMemoryOrderRepository instance")

        if get_app_settings().seed_sample_data:
            seed_sample_orders(_order_repository)
    return _order_repository


def get_order_service() -> OrderApplicationService:
    global _order_service
    if _order_service is None:
        _order_service = OrderApplicationService(repository=get_order_repository())
        logger.info("Created OrderApplicationService instance")
    return _order_service


# =============================================================================
# RESET (for testing)
# =============================================================================

def reset_dependencies():
    global _order_repository, _order_service

    _order_repository = None
    _order_service = None

    logger.info("Dependencies reset")
