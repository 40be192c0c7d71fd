# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from fastapi.testclient import TestClient

from shathi.api import create_app
from shathi.store import RecordStore


class TestGlucoseApi(unittest.TestCase):
    def setUp(self) -> None:
        self.store = RecordStore()
        self.app = create_app(store=self.store)
        self.client = TestClient(self.app)
        self.owner = self.app.state.demo_user_id

    def tearDown(self) -> None:
        self.client.close()

    def _create(self, level: float, measured_at: str, kind: str = "before_meal", **extra) -> dict:
        resp = self.client.post(
            "/api/glucose-readings",
            json={"level": level, "measured_at": measured_at, "measurement_type": kind, **extra},
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()

    def test_create_and_list_newest_first(self) -> None:
        first = self._create(6.8, "2024-03-01T09:00:00Z")
        second = self._create(9.2, "2024-03-01T20:00:00Z", "after_meal")
        self.assertGreater(second["id"], first["id"])
        self.assertEqual(first["owner_id"], self.owner)
        self.assertIn("created_at", first)

        resp = self.client.get("/api/glucose-readings")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([r["level"] for r in resp.json()], [9.2, 6.8])

    def test_limit_query(self) -> None:
        for hour in (8, 12, 18):
            self._create(5.0 + hour / 10, f"2024-03-01T{hour:02d}:00:00Z")
        resp = self.client.get("/api/glucose-readings", params={"limit": 1})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(resp.json()), 1)
        self.assertEqual(resp.json()[0]["measured_at"][:13], "2024-03-01T18")

        resp = self.client.get("/api/glucose-readings", params={"limit": 0})
        self.assertEqual(resp.status_code, 400)

        resp = self.client.get("/api/glucose-readings", params={"limit": 5000})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(resp.json()), 3)

    def test_window_query_is_inclusive(self) -> None:
        self._create(5.0, "2024-03-01T08:00:00Z")
        self._create(6.0, "2024-03-01T10:00:00Z")
        self._create(7.0, "2024-03-01T12:00:00Z")
        resp = self.client.get(
            "/api/glucose-readings",
            params={"start": "2024-03-01T10:00:00Z", "end": "2024-03-01T12:00:00Z"},
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([r["level"] for r in resp.json()], [7.0, 6.0])

    def test_owner_comes_from_server(self) -> None:
        created = self._create(6.0, "2024-03-01T08:00:00Z", owner_id=999)
        self.assertEqual(created["owner_id"], self.owner)

    def test_validation_errors_are_400(self) -> None:
        bad_payloads = [
            {"level": 0, "measured_at": "2024-03-01T08:00:00Z", "measurement_type": "before_meal"},
            {"level": -2.5, "measured_at": "2024-03-01T08:00:00Z", "measurement_type": "before_meal"},
            {"level": 6.0, "measurement_type": "before_meal"},
            {"level": 6.0, "measured_at": "2024-03-01T08:00:00Z", "measurement_type": "lunchtime"},
        ]
        for payload in bad_payloads:
            resp = self.client.post("/api/glucose-readings", json=payload)
            self.assertEqual(resp.status_code, 400, payload)
            self.assertIsInstance(resp.json()["detail"], str)
        self.assertEqual(self.store.counts()["glucose_readings"], 0)

    def test_update_merges_fields(self) -> None:
        created = self._create(6.8, "2024-03-01T09:00:00Z", notes="fasting")
        resp = self.client.put(f"/api/glucose-readings/{created['id']}", json={"level": 7.2})
        self.assertEqual(resp.status_code, 200, resp.text)
        body = resp.json()
        self.assertEqual(body["level"], 7.2)
        self.assertEqual(body["notes"], "fasting")
        self.assertEqual(body["measurement_type"], "before_meal")

        resp = self.client.put(f"/api/glucose-readings/{created['id']}", json={"notes": None})
        self.assertEqual(resp.status_code, 200)
        self.assertIsNone(resp.json()["notes"])

    def test_update_rejects_null_required_and_unknown_fields(self) -> None:
        created = self._create(6.8, "2024-03-01T09:00:00Z")
        resp = self.client.put(f"/api/glucose-readings/{created['id']}", json={"level": None})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("level", resp.json()["detail"])
        resp = self.client.put(f"/api/glucose-readings/{created['id']}", json={"owner_id": 5})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(self.store.get_glucose_reading(created["id"]).level, 6.8)

    def test_update_and_delete_unknown_id_are_404(self) -> None:
        resp = self.client.put("/api/glucose-readings/9999", json={"level": 7.0})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "Glucose reading not found")
        resp = self.client.delete("/api/glucose-readings/9999")
        self.assertEqual(resp.status_code, 404)

    def test_delete(self) -> None:
        created = self._create(6.8, "2024-03-01T09:00:00Z")
        resp = self.client.delete(f"/api/glucose-readings/{created['id']}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"success": True})
        self.assertEqual(self.client.get("/api/glucose-readings").json(), [])

    def test_other_owners_readings_are_invisible(self) -> None:
        other = self.store.create_user("someone-else", "hash")
        foreign = self.store.create_glucose_reading(
            other.id, {"level": 8.0, "measured_at": "2024-03-01T09:00:00Z", "measurement_type": "other"}
        )
        self.assertEqual(self.client.get("/api/glucose-readings").json(), [])
        resp = self.client.put(f"/api/glucose-readings/{foreign.id}", json={"level": 5.0})
        self.assertEqual(resp.status_code, 404)
        resp = self.client.delete(f"/api/glucose-readings/{foreign.id}")
        self.assertEqual(resp.status_code, 404)
        self.assertIsNotNone(self.store.get_glucose_reading(foreign.id))

    def test_summary_uses_target_range(self) -> None:
        for level, hour in ((3.5, 7), (4.0, 9), (6.5, 13), (7.0, 18), (11.0, 21)):
            self._create(level, f"2024-03-01T{hour:02d}:00:00Z")
        resp = self.client.get("/api/glucose-readings/summary", params={"date": "2024-03-01"})
        self.assertEqual(resp.status_code, 200, resp.text)
        body = resp.json()
        self.assertEqual(body["count"], 5)
        self.assertEqual(body["target_low"], 4.0)
        self.assertEqual(body["target_high"], 7.0)
        self.assertEqual(body["below_range"], 1)
        self.assertEqual(body["in_range"], 3)
        self.assertEqual(body["above_range"], 1)
        self.assertEqual(body["very_high"], 1)
        self.assertEqual(body["in_range_pct"], 60.0)
        self.assertEqual(body["minimum"], 3.5)
        self.assertEqual(body["maximum"], 11.0)
        self.assertEqual(body["average"], 6.4)
        self.assertEqual(body["latest"]["level"], 11.0)

        self.client.put("/api/user-settings", json={"target_range": "3.0-12.0"})
        body = self.client.get("/api/glucose-readings/summary").json()
        self.assertEqual(body["in_range"], 5)
        self.assertEqual(body["very_high"], 1)

        self.client.put("/api/user-settings", json={"target_range": "4.0-7.0"})
        self.store.put_settings(self.owner, {"target_range": "garbage"})
        body = self.client.get("/api/glucose-readings/summary").json()
        self.assertEqual((body["target_low"], body["target_high"]), (4.0, 7.0))

    def test_summary_empty(self) -> None:
        body = self.client.get("/api/glucose-readings/summary").json()
        self.assertEqual(body["count"], 0)
        self.assertIsNone(body["average"])
        self.assertIsNone(body["in_range_pct"])
        self.assertIsNone(body["latest"])

    def test_bad_window(self) -> None:
        resp = self.client.get(
            "/api/glucose-readings",
            params={"start": "2024-03-02T00:00:00Z", "end": "2024-03-01T00:00:00Z"},
        )
        self.assertEqual(resp.status_code, 400)
        resp = self.client.get(
            "/api/glucose-readings",
            params={"date": "2024-03-01", "start": "2024-03-01T00:00:00Z"},
        )
        self.assertEqual(resp.status_code, 400)


if __name__ == "__main__":
    unittest.main()
