import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse

from stockdash.config import Settings, get_settings
from stockdash.core.errors import InventoryError, StorageError
from stockdash.core.logging import setup_logging
from stockdash.dependencies import store_dependency
from stockdash.routers import (
    alerts_router,
    dashboard_router,
    health_router,
    products_router,
    stock_router,
    transfers_router,
    warehouses_router,
)

logger = logging.getLogger(__name__)

GENERIC_STORAGE_MESSAGE = "Internal Server Error: failed to read or update inventory data."


async def inventory_error_handler(_request: Request, exc: InventoryError):
    if isinstance(exc, StorageError):
        # The message can name files under DATA_DIR; keep it in the log only.
        logger.error("Storage failure: %s", exc.message)
        return JSONResponse(status_code=exc.status_code, content={"detail": GENERIC_STORAGE_MESSAGE})
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app(settings: Optional[Settings] = None, store=None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        Path(settings.DATA_DIR).mkdir(parents=True, exist_ok=True)
        logger.info("%s started (data dir: %s)", settings.APP_NAME, settings.DATA_DIR)
        yield

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.add_exception_handler(InventoryError, inventory_error_handler)
    if store is not None:
        app.dependency_overrides[store_dependency] = lambda: store

    app.include_router(health_router)
    app.include_router(dashboard_router)
    app.include_router(alerts_router)
    app.include_router(transfers_router)
    app.include_router(products_router)
    app.include_router(warehouses_router)
    app.include_router(stock_router)

    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url="/dashboard", status_code=302)

    return app


setup_logging()
app = create_app()


__all__ = ["app", "create_app"]
