from stockdash.services.alert_service import list_alerts, reconcile_and_persist, update_alert
from stockdash.services.dashboard_service import build_dashboard, calculate_metrics
from stockdash.services.inventory_service import calculate_inventory_overview
from stockdash.services.transfer_service import create_transfer, delete_transfer, list_transfers

__all__ = [
    "build_dashboard",
    "calculate_inventory_overview",
    "calculate_metrics",
    "create_transfer",
    "delete_transfer",
    "list_alerts",
    "list_transfers",
    "reconcile_and_persist",
    "update_alert",
]
