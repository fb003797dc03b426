# Collection names double as the JSON file stems under DATA_DIR.
PRODUCTS = "products"
WAREHOUSES = "warehouses"
STOCK = "stock"
TRANSFERS = "transfers"
ALERTS = "alerts"
COLLECTIONS = (PRODUCTS, WAREHOUSES, STOCK, TRANSFERS, ALERTS)

# Overview statuses and the colour tag each one renders with.
STATUS_CRITICAL = "Critical"
STATUS_LOW = "Low Stock"
STATUS_ADEQUATE = "Adequate"
STATUS_OVERSTOCKED = "Overstocked"
OVERVIEW_STATUSES = (STATUS_CRITICAL, STATUS_LOW, STATUS_ADEQUATE, STATUS_OVERSTOCKED)

STATUS_COLORS = {
    STATUS_CRITICAL: "error",
    STATUS_LOW: "warning",
    STATUS_ADEQUATE: "success",
    STATUS_OVERSTOCKED: "info",
}

# Chart colours for the stock-status histogram, in display order.
STATUS_CHART_COLORS = (
    (STATUS_CRITICAL, "#d32f2f"),
    (STATUS_LOW, "#ff9800"),
    (STATUS_ADEQUATE, "#4caf50"),
    (STATUS_OVERSTOCKED, "#0288d1"),
)

# Alert levels use their own vocabulary ("Low", not "Low Stock").
LEVEL_CRITICAL = "Critical"
LEVEL_LOW = "Low"
LEVEL_ADEQUATE = "Adequate"
LEVEL_OVERSTOCKED = "Overstocked"

ALERT_OPEN = "Open"
ALERT_ACKNOWLEDGED = "Acknowledged"
ALERT_RESOLVED = "Resolved"
ALERT_STATUSES = (ALERT_OPEN, ALERT_ACKNOWLEDGED, ALERT_RESOLVED)

# Target stock a reorder recommendation fills up to, as a multiple of reorderPoint.
REORDER_TARGET_FACTOR = 1.5

TRANSFER_COMPLETE = "Complete"

FILTER_ALL = "All"
