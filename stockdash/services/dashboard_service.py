from stockdash.core.constants import (
    PRODUCTS,
    STATUS_CHART_COLORS,
    STATUS_COLORS,
    STATUS_CRITICAL,
    STATUS_LOW,
    STOCK,
    WAREHOUSES,
)
from stockdash.schemas.inventory import ChartDataItem, DashboardMetrics, DashboardSummary, StockItem
from stockdash.schemas.product import Product
from stockdash.schemas.warehouse import Warehouse
from stockdash.services.inventory_service import calculate_inventory_overview, quantities_by_product
from stockdash.services.records import load_models

_SHORTAGE_COLORS = {STATUS_COLORS[STATUS_CRITICAL], STATUS_COLORS[STATUS_LOW]}


def _stock_value(row, unit_costs):
    # Rows pointing at a deleted product are worth nothing.
    return row.quantity * unit_costs.get(row.product_id, 0.0)


def _warehouse_data(warehouses, stock, unit_costs):
    values = {}
    for row in stock:
        values[row.warehouse_id] = values.get(row.warehouse_id, 0.0) + _stock_value(row, unit_costs)
    return [
        ChartDataItem(
            name=warehouse.code,
            value=values.get(warehouse.id, 0.0),
            full_name=warehouse.name,
        )
        for warehouse in warehouses
    ]


def _category_data(products, stock):
    totals = quantities_by_product(stock)
    categories = {}
    for product in products:
        categories[product.category] = categories.get(product.category, 0) + totals.get(product.id, 0)
    return [
        ChartDataItem(name=category, value=quantity)
        for category, quantity in categories.items()
        if quantity > 0
    ]


def _stock_status_data(overview):
    counts = {}
    for item in overview:
        counts[item.status] = counts.get(item.status, 0) + 1
    return [
        ChartDataItem(name=status, value=counts.get(status, 0), color=color)
        for status, color in STATUS_CHART_COLORS
        if counts.get(status, 0) > 0
    ]


def calculate_metrics(products, warehouses, stock, overview):
    unit_costs = {}
    for product in products:
        # First product wins when an id is duplicated.
        unit_costs.setdefault(product.id, product.unit_cost)
    return DashboardMetrics(
        total_value=sum(_stock_value(row, unit_costs) for row in stock),
        low_stock_count=sum(1 for item in overview if item.status_color in _SHORTAGE_COLORS),
        warehouse_data=_warehouse_data(warehouses, stock, unit_costs),
        category_data=_category_data(products, stock),
        stock_status_data=_stock_status_data(overview),
    )


def load_inventory(store):
    products = load_models(store, PRODUCTS, Product)
    warehouses = load_models(store, WAREHOUSES, Warehouse)
    stock = load_models(store, STOCK, StockItem)
    return products, warehouses, stock


def inventory_overview(store):
    products = load_models(store, PRODUCTS, Product)
    stock = load_models(store, STOCK, StockItem)
    return calculate_inventory_overview(products, stock)


def build_dashboard(store):
    products, warehouses, stock = load_inventory(store)
    overview = calculate_inventory_overview(products, stock)
    return DashboardSummary(
        overview=overview,
        metrics=calculate_metrics(products, warehouses, stock, overview),
    )


__all__ = [
    "build_dashboard",
    "calculate_metrics",
    "inventory_overview",
    "load_inventory",
]
