from collections import defaultdict

from stockdash.core.stock_rules import overview_status, percent_of_reorder, status_color
from stockdash.schemas.inventory import InventoryOverviewItem


def quantities_by_product(stock):
    """Total quantity per product id. Duplicate (product, warehouse) rows are summed."""
    totals = defaultdict(int)
    for row in stock:
        totals[row.product_id] += row.quantity
    return totals


def calculate_inventory_overview(products, stock):
    """One overview row per product, in product order."""
    totals = quantities_by_product(stock)
    overview = []
    for product in products:
        total_quantity = totals.get(product.id, 0)
        percent = percent_of_reorder(total_quantity, product.reorder_point)
        status = overview_status(percent)
        values = product.model_dump()
        values.update(
            total_quantity=total_quantity,
            status=status,
            status_color=status_color(status),
            percent_of_reorder=percent,
        )
        overview.append(InventoryOverviewItem.model_validate(values))
    return overview


__all__ = ["calculate_inventory_overview", "quantities_by_product"]
