from typing import List, Optional

from pydantic import ConfigDict, Field, NonNegativeInt

from stockdash.schemas.common import CamelModel, Identifier, RecordModel
from stockdash.schemas.product import Product


class StockItemBase(RecordModel):
    product_id: Identifier
    warehouse_id: Identifier
    quantity: NonNegativeInt = 0


class StockItemCreate(StockItemBase):
    model_config = ConfigDict(extra="ignore")


class StockItem(StockItemBase):
    id: Identifier


class StockItemUpdate(CamelModel):
    product_id: Optional[Identifier] = None
    warehouse_id: Optional[Identifier] = None
    quantity: Optional[int] = Field(default=None, ge=0)


class InventoryOverviewItem(Product):
    total_quantity: int
    status: str
    status_color: str
    # None when the reorder point is 0.
    percent_of_reorder: Optional[float] = None


class ChartDataItem(CamelModel):
    name: str
    value: float
    full_name: Optional[str] = None
    color: Optional[str] = None


class DashboardMetrics(CamelModel):
    total_value: float = 0.0
    low_stock_count: int = 0
    warehouse_data: List[ChartDataItem] = Field(default_factory=list)
    category_data: List[ChartDataItem] = Field(default_factory=list)
    stock_status_data: List[ChartDataItem] = Field(default_factory=list)


class DashboardSummary(CamelModel):
    overview: List[InventoryOverviewItem]
    metrics: DashboardMetrics
