import math

from stockdash.core.constants import (
    LEVEL_ADEQUATE,
    LEVEL_CRITICAL,
    LEVEL_LOW,
    LEVEL_OVERSTOCKED,
    REORDER_TARGET_FACTOR,
    STATUS_ADEQUATE,
    STATUS_COLORS,
    STATUS_CRITICAL,
    STATUS_LOW,
    STATUS_OVERSTOCKED,
)


def percent_of_reorder(total_quantity, reorder_point):
    """Total stock as a percentage of the reorder point.

    Returns None when the reorder point is 0: the ratio is undefined and the
    product is classified as adequate by both the overview and the alerts.
    """
    if not reorder_point:
        return None
    return total_quantity / reorder_point * 100


def _undefined(percent):
    return percent is None or not math.isfinite(percent)


def overview_status(percent):
    if _undefined(percent):
        return STATUS_ADEQUATE
    if percent < 20:
        return STATUS_CRITICAL
    if percent < 100:
        return STATUS_LOW
    if percent > 200:
        return STATUS_OVERSTOCKED
    return STATUS_ADEQUATE


def status_color(status):
    return STATUS_COLORS.get(status, STATUS_COLORS[STATUS_ADEQUATE])


def alert_level(percent):
    # Alert bands are wider than the overview bands: 40% is "Low Stock" on the
    # dashboard but a Critical alert.
    if _undefined(percent):
        return LEVEL_ADEQUATE
    if percent < 50:
        return LEVEL_CRITICAL
    if percent < 100:
        return LEVEL_LOW
    if percent <= 150:
        return LEVEL_ADEQUATE
    return LEVEL_OVERSTOCKED


def recommended_order_quantity(level, reorder_point, total_stock):
    if level == LEVEL_OVERSTOCKED:
        return 0
    return max(0, math.ceil(reorder_point * REORDER_TARGET_FACTOR - total_stock))


def round_percent(percent):
    """Round half up, the way the dashboard displays percentages."""
    if _undefined(percent):
        return 0
    return int(math.floor(percent + 0.5))


__all__ = [
    "alert_level",
    "overview_status",
    "percent_of_reorder",
    "recommended_order_quantity",
    "round_percent",
    "status_color",
]
