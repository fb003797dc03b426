"""Plain CRUD over the product, warehouse and stock collections.

No referential integrity: deleting a product or warehouse leaves its stock
rows in place, and the calculators treat those rows as orphans.
"""

import logging
from dataclasses import dataclass

from stockdash.core.constants import PRODUCTS, STOCK, WAREHOUSES
from stockdash.core.errors import NotFoundError
from stockdash.core.ids import new_identifier, normalize_id
from stockdash.schemas.inventory import StockItem
from stockdash.schemas.product import Product
from stockdash.schemas.warehouse import Warehouse
from stockdash.services.records import dump_models, load_models

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Catalog:
    collection: str
    model: type
    label: str


PRODUCT_CATALOG = Catalog(PRODUCTS, Product, "Product")
WAREHOUSE_CATALOG = Catalog(WAREHOUSES, Warehouse, "Warehouse")
STOCK_CATALOG = Catalog(STOCK, StockItem, "Stock item")


def _index_of(records, record_id):
    record_id = normalize_id(record_id)
    for index, record in enumerate(records):
        if record.id == record_id:
            return index
    return None


def list_records(store, catalog):
    return load_models(store, catalog.collection, catalog.model)


def get_record(store, catalog, record_id):
    records = list_records(store, catalog)
    index = _index_of(records, record_id)
    if index is None:
        raise NotFoundError("{} not found".format(catalog.label))
    return records[index]


def create_record(store, catalog, payload):
    """Append ``payload`` (a *Create schema) under the next free id."""
    with store.lock:
        records = list_records(store, catalog)
        values = payload.model_dump()
        values["id"] = new_identifier(records)
        record = catalog.model.model_validate(values)
        records.append(record)
        store.save_collection(catalog.collection, dump_models(records))

    logger.info("%s %s created", catalog.label, record.id)
    return record


def update_record(store, catalog, record_id, payload):
    """Merge the fields set on ``payload`` into the stored record. The id never changes."""
    with store.lock:
        records = list_records(store, catalog)
        index = _index_of(records, record_id)
        if index is None:
            raise NotFoundError("{} not found".format(catalog.label))

        values = records[index].model_dump()
        values.update(payload.model_dump(exclude_unset=True, exclude_none=True))
        values["id"] = records[index].id
        records[index] = catalog.model.model_validate(values)
        store.save_collection(catalog.collection, dump_models(records))

    logger.info("%s %s updated", catalog.label, records[index].id)
    return records[index]


def delete_record(store, catalog, record_id):
    with store.lock:
        records = list_records(store, catalog)
        index = _index_of(records, record_id)
        if index is None:
            raise NotFoundError("{} not found".format(catalog.label))
        removed = records.pop(index)
        store.save_collection(catalog.collection, dump_models(records))

    logger.info("%s %s deleted", catalog.label, removed.id)
    return removed


__all__ = [
    "PRODUCT_CATALOG",
    "STOCK_CATALOG",
    "WAREHOUSE_CATALOG",
    "Catalog",
    "create_record",
    "delete_record",
    "get_record",
    "list_records",
    "update_record",
]
