import argparse
import logging

from stockdash.config import get_settings
from stockdash.core.constants import ALERTS, PRODUCTS, STOCK, TRANSFERS, WAREHOUSES
from stockdash.core.logging import setup_logging
from stockdash.storage import JsonFileStore

logger = logging.getLogger(__name__)

WAREHOUSES_SEED = [
    {"id": "1", "code": "NYC", "name": "New York Central", "location": "Brooklyn, NY"},
    {"id": "2", "code": "CHI", "name": "Chicago Hub", "location": "Chicago, IL"},
    {"id": "3", "code": "LAX", "name": "Los Angeles West", "location": "Carson, CA"},
]

PRODUCTS_SEED = [
    {"id": "1", "sku": "EL-1001", "name": "USB-C Charger", "category": "Electronics",
     "unitCost": 12.5, "reorderPoint": 100},
    {"id": "2", "sku": "EL-1002", "name": "Wireless Mouse", "category": "Electronics",
     "unitCost": 8.0, "reorderPoint": 50},
    {"id": "3", "sku": "OF-2001", "name": "A4 Paper Ream", "category": "Office",
     "unitCost": 3.25, "reorderPoint": 200},
    {"id": "4", "sku": "OF-2002", "name": "Ballpoint Pens (12)", "category": "Office",
     "unitCost": 2.1, "reorderPoint": 80},
    {"id": "5", "sku": "FN-3001", "name": "Desk Lamp", "category": "Furniture",
     "unitCost": 19.99, "reorderPoint": 20},
]

STOCK_SEED = [
    {"id": "1", "productId": "1", "warehouseId": "1", "quantity": 25},
    {"id": "2", "productId": "1", "warehouseId": "2", "quantity": 15},
    {"id": "3", "productId": "2", "warehouseId": "1", "quantity": 60},
    {"id": "4", "productId": "2", "warehouseId": "3", "quantity": 30},
    {"id": "5", "productId": "3", "warehouseId": "2", "quantity": 20},
    {"id": "6", "productId": "4", "warehouseId": "3", "quantity": 120},
    {"id": "7", "productId": "5", "warehouseId": "1", "quantity": 55},
]


def parse_args():
    parser = argparse.ArgumentParser(description="Seed sample inventory data.")
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Directory for the JSON collections (defaults to DATA_DIR).",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Overwrite existing collections and clear transfers and alerts.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()
    store = JsonFileStore(args.data_dir or get_settings().DATA_DIR)

    with store.lock:
        if store.load_collection(PRODUCTS) and not args.reset:
            print("Seed skipped: products already exist (use --reset to overwrite).")
            return

        store.commit(
            {
                WAREHOUSES: WAREHOUSES_SEED,
                PRODUCTS: PRODUCTS_SEED,
                STOCK: STOCK_SEED,
                TRANSFERS: [],
                ALERTS: [],
            }
        )

    logger.info(
        "Seeded %d warehouses, %d products, %d stock rows into %s",
        len(WAREHOUSES_SEED),
        len(PRODUCTS_SEED),
        len(STOCK_SEED),
        store.data_dir,
    )


if __name__ == "__main__":
    main()
