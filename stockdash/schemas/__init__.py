from stockdash.schemas.alert import Alert, AlertRecalculation, AlertUpdate, AlertWarehouse
from stockdash.schemas.inventory import (
    ChartDataItem,
    DashboardMetrics,
    DashboardSummary,
    InventoryOverviewItem,
    StockItem,
    StockItemCreate,
    StockItemUpdate,
)
from stockdash.schemas.product import Product, ProductCreate, ProductUpdate
from stockdash.schemas.transfer import Transfer, TransferCreate
from stockdash.schemas.warehouse import Warehouse, WarehouseCreate, WarehouseUpdate

__all__ = [
    "Alert",
    "AlertRecalculation",
    "AlertUpdate",
    "AlertWarehouse",
    "ChartDataItem",
    "DashboardMetrics",
    "DashboardSummary",
    "InventoryOverviewItem",
    "Product",
    "ProductCreate",
    "ProductUpdate",
    "StockItem",
    "StockItemCreate",
    "StockItemUpdate",
    "Transfer",
    "TransferCreate",
    "Warehouse",
    "WarehouseCreate",
    "WarehouseUpdate",
]
