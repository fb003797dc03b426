"""Stock alerts: derived from current stock, merged with stored alert state.

Computing alerts is pure (``compute_alerts`` / ``merge_alerts``); listing them
through ``list_alerts`` recomputes and rewrites the alert collection on every
call, so human-set status and notes follow the product while the stock
figures stay current.
"""

import logging
from collections import defaultdict
from datetime import datetime, timezone

from stockdash.core.constants import (
    ALERT_ACKNOWLEDGED,
    ALERT_OPEN,
    ALERT_RESOLVED,
    ALERT_STATUSES,
    ALERTS,
    FILTER_ALL,
    LEVEL_ADEQUATE,
)
from stockdash.core.errors import NotFoundError, ValidationError
from stockdash.core.stock_rules import (
    alert_level,
    percent_of_reorder,
    recommended_order_quantity,
    round_percent,
)
from stockdash.schemas.alert import Alert, AlertWarehouse
from stockdash.services.dashboard_service import load_inventory
from stockdash.services.records import dump_models, load_models

logger = logging.getLogger(__name__)

# Fields recomputed from stock on every pass; everything else on a stored
# alert (id, status, notes, timestamps) belongs to whoever handled it.
_STOCK_DERIVED_FIELDS = (
    "total_stock",
    "percent_of_reorder",
    "recommended_order_quantity",
    "level",
    "warehouses",
)


def _now(now=None):
    return now or datetime.now(timezone.utc)


def _warehouse_label(warehouse_id, warehouse_names):
    return warehouse_names.get(warehouse_id) or "Warehouse {}".format(warehouse_id)


def compute_alerts(products, stock, warehouses=(), now=None):
    """Fresh Open alerts for every product outside the adequate band."""
    now = _now(now)
    stamp = int(now.timestamp() * 1000)
    warehouse_names = {warehouse.id: warehouse.name for warehouse in warehouses}

    rows_by_product = defaultdict(list)
    for row in stock:
        rows_by_product[row.product_id].append(row)

    alerts = []
    for product in products:
        rows = rows_by_product.get(product.id, [])
        total_stock = sum(row.quantity for row in rows)
        percent = percent_of_reorder(total_stock, product.reorder_point)
        level = alert_level(percent)
        if level == LEVEL_ADEQUATE:
            continue

        alerts.append(
            Alert(
                id="alert-{}-{}".format(product.id, stamp),
                product_id=product.id,
                product_name=product.name,
                product_sku=product.sku,
                total_stock=total_stock,
                reorder_point=product.reorder_point,
                level=level,
                status=ALERT_OPEN,
                percent_of_reorder=round_percent(percent),
                recommended_order_quantity=recommended_order_quantity(
                    level, product.reorder_point, total_stock
                ),
                warehouses=[
                    AlertWarehouse(
                        id=row.warehouse_id,
                        name=_warehouse_label(row.warehouse_id, warehouse_names),
                        stock=row.quantity,
                    )
                    for row in rows
                ],
                created_at=now,
            )
        )
    return alerts


def merge_alerts(fresh, existing):
    """Carry stored, unresolved alerts forward with refreshed stock figures.

    A resolved alert is never revived: if its product still qualifies, the
    fresh Open alert replaces it. Products that no longer qualify drop out.
    """
    # Several stored alerts for one product: the last one wins.
    existing_by_product = {alert.product_id: alert for alert in existing}

    merged = []
    for alert in fresh:
        prior = existing_by_product.get(alert.product_id)
        if prior is not None and prior.status != ALERT_RESOLVED:
            merged.append(
                prior.model_copy(
                    update={field: getattr(alert, field) for field in _STOCK_DERIVED_FIELDS}
                )
            )
        else:
            merged.append(alert)
    return merged


def reconcile_and_persist(store, now=None):
    with store.lock:
        products, warehouses, stock = load_inventory(store)
        existing = load_models(store, ALERTS, Alert)
        merged = merge_alerts(compute_alerts(products, stock, warehouses, now=now), existing)
        store.save_collection(ALERTS, dump_models(merged))
    logger.debug("Reconciled %d alert(s) against %d stored", len(merged), len(existing))
    return merged


def _matches(value, wanted):
    return not wanted or wanted == FILTER_ALL or value == wanted


def list_alerts(store, status=None, level=None, now=None):
    alerts = reconcile_and_persist(store, now=now)
    return [alert for alert in alerts if _matches(alert.status, status) and _matches(alert.level, level)]


def recalculate_alerts(store, now=None):
    """Replace the alert collection with a fresh computation, dropping any
    acknowledgements and notes."""
    with store.lock:
        products, warehouses, stock = load_inventory(store)
        alerts = compute_alerts(products, stock, warehouses, now=now)
        store.save_collection(ALERTS, dump_models(alerts))
    logger.info("Alerts recalculated: %d active", len(alerts))
    return alerts


def update_alert(store, alert_id, status, notes=None, now=None):
    if not alert_id or not status:
        raise ValidationError("Missing required fields: id, status")
    if status not in ALERT_STATUSES:
        raise ValidationError(
            "Invalid alert status: {}. Expected one of: {}".format(status, ", ".join(ALERT_STATUSES))
        )

    now = _now(now)
    with store.lock:
        alerts = load_models(store, ALERTS, Alert)
        index = next((i for i, alert in enumerate(alerts) if alert.id == alert_id), None)
        if index is None:
            raise NotFoundError("Alert not found")

        changes = {"status": status}
        if notes:
            changes["notes"] = notes
        if status == ALERT_ACKNOWLEDGED:
            changes["acknowledged_at"] = now
        elif status == ALERT_RESOLVED:
            changes["resolved_at"] = now

        alerts[index] = alerts[index].model_copy(update=changes)
        store.save_collection(ALERTS, dump_models(alerts))

    logger.info("Alert %s set to %s", alert_id, status)
    return alerts[index]


__all__ = [
    "compute_alerts",
    "list_alerts",
    "merge_alerts",
    "recalculate_alerts",
    "reconcile_and_persist",
    "update_alert",
]
