"""Stock transfers between warehouses.

A transfer debits the source row, credits the destination row and appends an
immutable transfer record. Both collections are written in one
``store.commit`` so they land together.
"""

import logging
import math
import numbers
from datetime import datetime, timezone

from stockdash.core.constants import STOCK, TRANSFER_COMPLETE, TRANSFERS
from stockdash.core.errors import NotFoundError, ValidationError
from stockdash.core.ids import new_identifier, normalize_id
from stockdash.schemas.inventory import StockItem
from stockdash.schemas.transfer import Transfer
from stockdash.services.records import dump_models, load_models

logger = logging.getLogger(__name__)


def _find_row(stock, product_id, warehouse_id):
    for index, row in enumerate(stock):
        if row.product_id == product_id and row.warehouse_id == warehouse_id:
            return index
    return None


def _validate_quantity(quantity):
    if isinstance(quantity, bool) or not isinstance(quantity, numbers.Real) or not quantity > 0:
        raise ValidationError("Quantity must be a positive number.")
    if not math.isfinite(quantity):
        raise ValidationError("Quantity must be a positive number.")
    if quantity != int(quantity):
        raise ValidationError("Quantity must be a whole number of units.")
    return int(quantity)


def validate_transfer_request(product_id, from_warehouse_id, to_warehouse_id, quantity, reason):
    """Checks that need no stored data, in the order clients see them."""
    product_id = normalize_id(product_id)
    from_warehouse_id = normalize_id(from_warehouse_id)
    to_warehouse_id = normalize_id(to_warehouse_id)
    # Stored as sent; whitespace alone does not count as a reason.
    if not product_id or not from_warehouse_id or not to_warehouse_id or not (reason or "").strip():
        raise ValidationError("Product, warehouse IDs, and transfer reason are required.")
    quantity = _validate_quantity(quantity)
    if from_warehouse_id == to_warehouse_id:
        raise ValidationError("Source and destination warehouses must be different for a transfer.")
    return product_id, from_warehouse_id, to_warehouse_id, quantity, reason


def apply_transfer(stock, product_id, from_warehouse_id, to_warehouse_id, quantity):
    """Move ``quantity`` between two rows of ``stock`` in place.

    Raises ValidationError, leaving ``stock`` untouched, when the source
    row holds less than ``quantity``.
    """
    source_index = _find_row(stock, product_id, from_warehouse_id)
    available = stock[source_index].quantity if source_index is not None else 0
    if quantity > available:
        raise ValidationError(
            "Insufficient stock. Only {} units are currently available "
            "at the source warehouse.".format(available)
        )

    remaining = available - quantity
    if remaining > 0:
        stock[source_index] = stock[source_index].model_copy(update={"quantity": remaining})
    else:
        # Emptied source rows are removed rather than kept at zero.
        del stock[source_index]

    destination_index = _find_row(stock, product_id, to_warehouse_id)
    if destination_index is not None:
        row = stock[destination_index]
        stock[destination_index] = row.model_copy(update={"quantity": row.quantity + quantity})
    else:
        stock.append(
            StockItem(
                id=new_identifier(stock),
                product_id=product_id,
                warehouse_id=to_warehouse_id,
                quantity=quantity,
            )
        )
    return stock


def create_transfer(store, product_id, from_warehouse_id, to_warehouse_id, quantity, reason, now=None):
    product_id, from_warehouse_id, to_warehouse_id, quantity, reason = validate_transfer_request(
        product_id, from_warehouse_id, to_warehouse_id, quantity, reason
    )

    with store.lock:
        stock = load_models(store, STOCK, StockItem)
        transfers = load_models(store, TRANSFERS, Transfer)

        apply_transfer(stock, product_id, from_warehouse_id, to_warehouse_id, quantity)
        transfer = Transfer(
            id=new_identifier(transfers),
            product_id=product_id,
            from_warehouse_id=from_warehouse_id,
            to_warehouse_id=to_warehouse_id,
            quantity=quantity,
            status=TRANSFER_COMPLETE,
            timestamp=now or datetime.now(timezone.utc),
            reason=reason,
        )
        transfers.append(transfer)

        store.commit({STOCK: dump_models(stock), TRANSFERS: dump_models(transfers)})

    logger.info(
        "Transfer %s: product %s x%d from %s to %s",
        transfer.id,
        product_id,
        quantity,
        from_warehouse_id,
        to_warehouse_id,
    )
    return transfer


def list_transfers(store):
    """Most recent first; equal timestamps keep reverse insertion order."""
    transfers = load_models(store, TRANSFERS, Transfer)
    transfers.reverse()
    # sorted() is stable, so the reversal above decides ties.
    return sorted(transfers, key=lambda transfer: transfer.timestamp, reverse=True)


def delete_transfer(store, transfer_id):
    """Remove a transfer from history. Stock is not moved back."""
    transfer_id = normalize_id(transfer_id)
    with store.lock:
        transfers = load_models(store, TRANSFERS, Transfer)
        index = next((i for i, t in enumerate(transfers) if t.id == transfer_id), None)
        if index is None:
            raise NotFoundError("Transfer not found")
        removed = transfers.pop(index)
        store.save_collection(TRANSFERS, dump_models(transfers))

    logger.info("Transfer %s deleted from history", removed.id)
    return removed


__all__ = [
    "apply_transfer",
    "create_transfer",
    "delete_transfer",
    "list_transfers",
    "validate_transfer_request",
]
