from typing import Any, Optional

from stockdash.core.constants import TRANSFER_COMPLETE
from stockdash.schemas.common import CamelModel, Identifier, RecordModel, UtcDatetime


class Transfer(RecordModel):
    id: Identifier
    product_id: Identifier
    from_warehouse_id: Identifier
    to_warehouse_id: Identifier
    quantity: int
    status: str = TRANSFER_COMPLETE
    timestamp: UtcDatetime
    reason: Optional[str] = None


class TransferCreate(CamelModel):
    # Deliberately loose: the transfer service checks presence, type and
    # ordering itself so each failure gets its own message.
    product_id: Optional[Identifier] = None
    from_warehouse_id: Optional[Identifier] = None
    to_warehouse_id: Optional[Identifier] = None
    quantity: Any = None
    reason: Optional[str] = None
