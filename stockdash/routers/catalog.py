from typing import List

from fastapi import APIRouter, Depends, Response, status

from stockdash.dependencies import store_dependency
from stockdash.schemas.inventory import StockItem, StockItemCreate, StockItemUpdate
from stockdash.schemas.product import Product, ProductCreate, ProductUpdate
from stockdash.schemas.warehouse import Warehouse, WarehouseCreate, WarehouseUpdate
from stockdash.services.catalog_service import (
    PRODUCT_CATALOG,
    STOCK_CATALOG,
    WAREHOUSE_CATALOG,
    create_record,
    delete_record,
    get_record,
    list_records,
    update_record,
)


def build_catalog_router(catalog, prefix, tag, read_model, create_model, update_model):
    """List/get/create/update/delete routes for one stored collection."""
    router = APIRouter(prefix=prefix, tags=[tag])

    @router.get("", response_model=List[read_model])
    def list_items(store=Depends(store_dependency)):
        return list_records(store, catalog)

    @router.post("", response_model=read_model, status_code=status.HTTP_201_CREATED)
    def create_item(payload: create_model, store=Depends(store_dependency)):
        return create_record(store, catalog, payload)

    @router.get("/{record_id}", response_model=read_model)
    def get_item(record_id: str, store=Depends(store_dependency)):
        return get_record(store, catalog, record_id)

    @router.put("/{record_id}", response_model=read_model)
    def update_item(record_id: str, payload: update_model, store=Depends(store_dependency)):
        return update_record(store, catalog, record_id, payload)

    @router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_item(record_id: str, store=Depends(store_dependency)):
        delete_record(store, catalog, record_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


products_router = build_catalog_router(
    PRODUCT_CATALOG, "/products", "Products", Product, ProductCreate, ProductUpdate
)
warehouses_router = build_catalog_router(
    WAREHOUSE_CATALOG, "/warehouses", "Warehouses", Warehouse, WarehouseCreate, WarehouseUpdate
)
stock_router = build_catalog_router(
    STOCK_CATALOG, "/stock", "Stock", StockItem, StockItemCreate, StockItemUpdate
)


__all__ = ["build_catalog_router", "products_router", "stock_router", "warehouses_router"]
