from typing import Optional

from pydantic import ConfigDict

from stockdash.schemas.common import CamelModel, Identifier, RecordModel


class WarehouseBase(RecordModel):
    code: str
    name: str
    location: str = ""


class WarehouseCreate(WarehouseBase):
    model_config = ConfigDict(extra="ignore")


class Warehouse(WarehouseBase):
    id: Identifier


class WarehouseUpdate(CamelModel):
    code: Optional[str] = None
    name: Optional[str] = None
    location: Optional[str] = None
