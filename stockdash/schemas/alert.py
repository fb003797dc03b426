from typing import List, Optional

from pydantic import Field

from stockdash.core.constants import ALERT_OPEN
from stockdash.schemas.common import CamelModel, Identifier, RecordModel, UtcDatetime


class AlertWarehouse(CamelModel):
    id: Identifier
    name: str
    stock: int


class Alert(RecordModel):
    id: Identifier
    product_id: Identifier
    product_name: str = ""
    product_sku: str = ""
    total_stock: int
    reorder_point: int
    level: str
    status: str = ALERT_OPEN
    percent_of_reorder: int
    recommended_order_quantity: int
    warehouses: List[AlertWarehouse] = Field(default_factory=list)
    notes: Optional[str] = None
    created_at: UtcDatetime
    acknowledged_at: Optional[UtcDatetime] = None
    resolved_at: Optional[UtcDatetime] = None


class AlertUpdate(CamelModel):
    id: Optional[Identifier] = None
    status: Optional[str] = None
    notes: Optional[str] = None


class AlertRecalculation(CamelModel):
    message: str
    count: int
    alerts: List[Alert]
