from typing import Optional

from pydantic import ConfigDict, Field, NonNegativeInt

from stockdash.schemas.common import CamelModel, Identifier, RecordModel


class ProductBase(RecordModel):
    sku: str
    name: str
    category: str = ""
    unit_cost: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    reorder_point: NonNegativeInt = 0


class ProductCreate(ProductBase):
    # Unknown client keys are not written to the collection.
    model_config = ConfigDict(extra="ignore")


class Product(ProductBase):
    id: Identifier


class ProductUpdate(CamelModel):
    sku: Optional[str] = None
    name: Optional[str] = None
    category: Optional[str] = None
    unit_cost: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    reorder_point: Optional[int] = Field(default=None, ge=0)


__all__ = ["Product", "ProductBase", "ProductCreate", "ProductUpdate"]
