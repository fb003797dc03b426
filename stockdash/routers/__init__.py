from stockdash.routers.alerts import router as alerts_router
from stockdash.routers.catalog import products_router, stock_router, warehouses_router
from stockdash.routers.dashboard import router as dashboard_router
from stockdash.routers.health import router as health_router
from stockdash.routers.transfers import router as transfers_router

__all__ = [
    "alerts_router",
    "dashboard_router",
    "health_router",
    "products_router",
    "stock_router",
    "transfers_router",
    "warehouses_router",
]
