from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from stockdash.dependencies import store_dependency
from stockdash.schemas.alert import Alert, AlertRecalculation, AlertUpdate
from stockdash.services.alert_service import list_alerts, recalculate_alerts, update_alert

router = APIRouter(prefix="/alerts", tags=["Alerts"])


@router.get("", response_model=List[Alert])
def get_alerts(
    status: Optional[str] = Query(None, description="Open, Acknowledged, Resolved or All"),
    level: Optional[str] = Query(None, description="Critical, Low, Overstocked or All"),
    store=Depends(store_dependency),
):
    # Listing regenerates and rewrites the stored alerts.
    return list_alerts(store, status=status, level=level)


@router.post("/calculate", response_model=AlertRecalculation)
def calculate_alerts(store=Depends(store_dependency)):
    alerts = recalculate_alerts(store)
    return AlertRecalculation(
        message="Alerts recalculated successfully",
        count=len(alerts),
        alerts=alerts,
    )


@router.put("/update", response_model=Alert)
def put_alert_update(payload: AlertUpdate, store=Depends(store_dependency)):
    return update_alert(store, payload.id, payload.status, notes=payload.notes)


__all__ = ["router"]
