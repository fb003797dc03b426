from typing import List

from fastapi import APIRouter, Depends

from stockdash.dependencies import store_dependency
from stockdash.schemas.inventory import DashboardMetrics, DashboardSummary, InventoryOverviewItem
from stockdash.services.dashboard_service import build_dashboard, inventory_overview

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardSummary, response_model_exclude_none=True)
def dashboard_summary(store=Depends(store_dependency)):
    return build_dashboard(store)


@router.get("/overview", response_model=List[InventoryOverviewItem])
def overview(store=Depends(store_dependency)):
    return inventory_overview(store)


@router.get("/metrics", response_model=DashboardMetrics, response_model_exclude_none=True)
def metrics(store=Depends(store_dependency)):
    return build_dashboard(store).metrics


__all__ = ["router"]
