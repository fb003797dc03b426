import json
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from stockdash.main import GENERIC_STORAGE_MESSAGE, create_app
from stockdash.storage import JsonFileStore


def _write(data_dir, name, records):
    (data_dir / f"{name}.json").write_text(json.dumps(records), encoding="utf-8")


class ApiTestCase(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.data_dir = Path(self._tmp.name)
        self.store = JsonFileStore(self.data_dir)
        self.client = TestClient(create_app(store=self.store))

    def tearDown(self):
        self._tmp.cleanup()

    def seed(self):
        _write(
            self.data_dir,
            "warehouses",
            [
                {"id": "1", "code": "NYC", "name": "New York Central", "location": "NY"},
                {"id": "2", "code": "CHI", "name": "Chicago Hub", "location": "IL"},
            ],
        )
        _write(
            self.data_dir,
            "products",
            [
                {"id": "1", "sku": "EL-1", "name": "Charger", "category": "Electronics",
                 "unitCost": 10, "reorderPoint": 100},
                {"id": "2", "sku": "OF-1", "name": "Paper", "category": "Office",
                 "unitCost": 2, "reorderPoint": 10},
            ],
        )
        _write(
            self.data_dir,
            "stock",
            [
                {"id": "1", "productId": "1", "warehouseId": "1", "quantity": 25},
                {"id": "2", "productId": "1", "warehouseId": "2", "quantity": 15},
                {"id": "3", "productId": "2", "warehouseId": "1", "quantity": 12},
            ],
        )


class HealthAndRootTest(ApiTestCase):
    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")

    def test_root_redirects_to_dashboard(self):
        response = self.client.get("/", follow_redirects=False)
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.headers["location"], "/dashboard")


class DashboardApiTest(ApiTestCase):
    def test_dashboard_summary(self):
        self.seed()

        response = self.client.get("/dashboard")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        statuses = {item["id"]: item["status"] for item in body["overview"]}
        self.assertEqual(statuses, {"1": "Low Stock", "2": "Adequate"})
        self.assertEqual(body["overview"][0]["totalQuantity"], 40)
        self.assertEqual(body["overview"][0]["statusColor"], "warning")
        self.assertEqual(body["metrics"]["totalValue"], 424)
        self.assertEqual(body["metrics"]["lowStockCount"], 1)
        self.assertEqual(
            [(w["name"], w["value"]) for w in body["metrics"]["warehouseData"]],
            [("NYC", 274), ("CHI", 150)],
        )

    def test_dashboard_on_empty_data_dir(self):
        response = self.client.get("/dashboard")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["overview"], [])
        self.assertEqual(response.json()["metrics"]["totalValue"], 0)

    def test_dashboard_does_not_write(self):
        self.seed()
        self.client.get("/dashboard/overview")
        self.client.get("/dashboard/metrics")
        self.assertFalse((self.data_dir / "alerts.json").exists())

    def test_storage_failure_is_generic_500(self):
        (self.data_dir / "products.json").write_text("{not json", encoding="utf-8")

        response = self.client.get("/dashboard")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"detail": GENERIC_STORAGE_MESSAGE})
        self.assertNotIn("products.json", response.text)


class AlertsApiTest(ApiTestCase):
    def test_listing_persists_alerts(self):
        self.seed()

        response = self.client.get("/alerts")

        self.assertEqual(response.status_code, 200)
        (alert,) = response.json()
        self.assertEqual(alert["productId"], "1")
        self.assertEqual(alert["level"], "Critical")
        self.assertEqual(alert["percentOfReorder"], 40)
        self.assertEqual(alert["recommendedOrderQuantity"], 110)
        self.assertEqual(
            [w["name"] for w in alert["warehouses"]], ["New York Central", "Chicago Hub"]
        )
        stored = self.store.load_collection("alerts")
        self.assertEqual(stored[0]["id"], alert["id"])

    def test_filters(self):
        self.seed()
        self.assertEqual(len(self.client.get("/alerts", params={"level": "Low"}).json()), 0)
        self.assertEqual(len(self.client.get("/alerts", params={"level": "All"}).json()), 1)
        self.assertEqual(len(self.client.get("/alerts", params={"status": "Open"}).json()), 1)

    def test_acknowledge_then_list_keeps_status(self):
        self.seed()
        alert_id = self.client.get("/alerts").json()[0]["id"]

        response = self.client.put(
            "/alerts/update", json={"id": alert_id, "status": "Acknowledged", "notes": "ordered"}
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "Acknowledged")
        self.assertIsNotNone(response.json()["acknowledgedAt"])
        (listed,) = self.client.get("/alerts").json()
        self.assertEqual(listed["id"], alert_id)
        self.assertEqual(listed["status"], "Acknowledged")
        self.assertEqual(listed["notes"], "ordered")

    def test_update_errors(self):
        self.seed()
        self.client.get("/alerts")

        missing = self.client.put("/alerts/update", json={"id": "x"})
        self.assertEqual(missing.status_code, 400)
        invalid = self.client.put("/alerts/update", json={"id": "x", "status": "Later"})
        self.assertEqual(invalid.status_code, 400)
        unknown = self.client.put("/alerts/update", json={"id": "x", "status": "Resolved"})
        self.assertEqual(unknown.status_code, 404)
        self.assertEqual(unknown.json(), {"detail": "Alert not found"})

    def test_recalculate(self):
        self.seed()

        response = self.client.post("/alerts/calculate")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["count"], 1)
        self.assertEqual(len(body["alerts"]), 1)


class TransfersApiTest(ApiTestCase):
    def _payload(self, **overrides):
        payload = {
            "productId": "1",
            "fromWarehouseId": "1",
            "toWarehouseId": "2",
            "quantity": 5,
            "reason": "Rebalance",
        }
        payload.update(overrides)
        return payload

    def test_create_list_delete(self):
        self.seed()

        created = self.client.post("/transfers/create", json=self._payload())

        self.assertEqual(created.status_code, 201)
        body = created.json()
        self.assertEqual(body["status"], "Complete")
        self.assertEqual(body["quantity"], 5)
        quantities = {
            row["warehouseId"]: row["quantity"]
            for row in self.store.load_collection("stock")
            if row["productId"] == "1"
        }
        self.assertEqual(quantities, {"1": 20, "2": 20})

        listed = self.client.get("/transfers").json()
        self.assertEqual([t["id"] for t in listed], [body["id"]])

        self.assertEqual(self.client.delete(f"/transfers/{body['id']}").status_code, 204)
        self.assertEqual(self.client.get("/transfers").json(), [])
        self.assertEqual(self.client.delete(f"/transfers/{body['id']}").status_code, 404)

    def test_rejections_are_400_with_detail(self):
        self.seed()

        too_many = self.client.post("/transfers/create", json=self._payload(quantity=41))
        self.assertEqual(too_many.status_code, 400)
        self.assertIn("Only 25 units", too_many.json()["detail"])

        same = self.client.post("/transfers/create", json=self._payload(toWarehouseId="1"))
        self.assertEqual(same.status_code, 400)

        infinite = self.client.post(
            "/transfers/create",
            content=json.dumps(self._payload(quantity=float("inf"))),
            headers={"content-type": "application/json"},
        )
        self.assertEqual(infinite.status_code, 400)
        self.assertEqual(infinite.json()["detail"], "Quantity must be a positive number.")

        missing = self.client.post("/transfers/create", json=self._payload(reason=""))
        self.assertEqual(
            missing.json()["detail"], "Product, warehouse IDs, and transfer reason are required."
        )
        self.assertEqual(self.store.load_collection("transfers"), [])


class CatalogApiTest(ApiTestCase):
    def test_product_crud(self):
        created = self.client.post(
            "/products",
            json={"sku": "GD-1", "name": "Hose", "category": "Garden", "unitCost": 4.5, "reorderPoint": 30},
        )
        self.assertEqual(created.status_code, 201)
        self.assertEqual(created.json()["id"], "1")

        updated = self.client.put("/products/1", json={"reorderPoint": 40})
        self.assertEqual(updated.status_code, 200)
        self.assertEqual(updated.json()["reorderPoint"], 40)
        self.assertEqual(updated.json()["name"], "Hose")

        self.assertEqual(self.client.get("/products/1").json()["reorderPoint"], 40)
        self.assertEqual(len(self.client.get("/products").json()), 1)

        self.assertEqual(self.client.delete("/products/1").status_code, 204)
        missing = self.client.get("/products/1")
        self.assertEqual(missing.status_code, 404)
        self.assertEqual(missing.json(), {"detail": "Product not found"})

    def test_warehouse_and_stock_crud(self):
        warehouse = self.client.post("/warehouses", json={"code": "LAX", "name": "LA West"}).json()
        product = self.client.post("/products", json={"sku": "S", "name": "N", "reorderPoint": 10}).json()

        row = self.client.post(
            "/stock",
            json={"productId": product["id"], "warehouseId": warehouse["id"], "quantity": 7},
        )
        self.assertEqual(row.status_code, 201)

        changed = self.client.put(f"/stock/{row.json()['id']}", json={"quantity": 3})
        self.assertEqual(changed.json()["quantity"], 3)
        self.assertEqual(self.client.get("/dashboard/overview").json()[0]["totalQuantity"], 3)

        self.assertEqual(self.client.delete(f"/warehouses/{warehouse['id']}").status_code, 204)
        # Stock rows are not cascaded.
        self.assertEqual(len(self.client.get("/stock").json()), 1)
        self.assertEqual(self.client.get("/stock/99").json(), {"detail": "Stock item not found"})

    def test_infinite_unit_cost_rejected(self):
        response = self.client.post(
            "/products",
            content='{"sku": "S", "name": "N", "unitCost": Infinity}',
            headers={"content-type": "application/json"},
        )
        self.assertEqual(response.status_code, 422)
        self.assertEqual(self.store.load_collection("products"), [])

        self.client.post("/products", json={"sku": "S", "name": "N", "unitCost": 1})
        update = self.client.put(
            "/products/1",
            content='{"unitCost": Infinity}',
            headers={"content-type": "application/json"},
        )
        self.assertEqual(update.status_code, 422)

    def test_unknown_keys_are_not_stored(self):
        created = self.client.post(
            "/warehouses", json={"code": "LAX", "name": "LA West", "manager": "x", "id": "42"}
        )
        self.assertEqual(created.status_code, 201)
        self.assertEqual(created.json()["id"], "1")
        (stored,) = self.store.load_collection("warehouses")
        self.assertNotIn("manager", stored)

        self.client.post("/products", json={"sku": "S", "name": "N", "debug": True})
        self.assertNotIn("debug", self.store.load_collection("products")[0])

        self.client.post("/stock", json={"productId": "1", "warehouseId": "1", "quantity": 2, "note": "x"})
        self.assertNotIn("note", self.store.load_collection("stock")[0])

    def test_negative_quantity_rejected(self):
        response = self.client.post("/stock", json={"productId": "1", "warehouseId": "1", "quantity": -1})
        self.assertEqual(response.status_code, 422)


if __name__ == "__main__":
    unittest.main()
