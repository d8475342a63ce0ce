"""
API Routes Module
"""
from .health import router as health_router
from .catalog import router as catalog_router
from .orders import router as orders_router
from .promotions import router as promotions_router
from .carts import router as carts_router
from .schema import router as schema_router

__all__ = [
    "health_router",
    "catalog_router",
    "orders_router",
    "promotions_router",
    "carts_router",
    "schema_router",
]
