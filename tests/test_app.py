# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from fastapi.testclient import TestClient

from shathi.api import create_app
from shathi.auth.security import hash_password, verify_password
from shathi.auth.storage import ensure_demo_user
from shathi.config import Settings
from shathi.preferences.models import parse_target_range
from shathi.store import RecordStore


class TestUserSettingsApi(unittest.TestCase):
    def setUp(self) -> None:
        self.store = RecordStore()
        self.app = create_app(store=self.store)
        self.client = TestClient(self.app)

    def tearDown(self) -> None:
        self.client.close()

    def test_demo_user_has_default_settings(self) -> None:
        resp = self.client.get("/api/user-settings")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["theme"], "light")
        self.assertEqual(body["language"], "bn")
        self.assertEqual(body["glucose_unit"], "mmol/L")
        self.assertEqual(body["target_range"], "4.0-7.0")
        self.assertTrue(body["reminders_enabled"])
        self.assertEqual(body["owner_id"], self.app.state.demo_user_id)

    def test_put_merges(self) -> None:
        resp = self.client.put("/api/user-settings", json={"theme": "dark"})
        self.assertEqual(resp.status_code, 200)
        first = resp.json()
        resp = self.client.put("/api/user-settings", json={"language": "en"})
        second = resp.json()
        self.assertEqual(second["theme"], "dark")
        self.assertEqual(second["language"], "en")
        self.assertEqual(second["id"], first["id"])

    def test_put_validation(self) -> None:
        for payload in ({"theme": "neon"}, {"target_range": "7-4"}, {"target_range": "abc"}, {"glucose_unit": "g"}):
            resp = self.client.put("/api/user-settings", json=payload)
            self.assertEqual(resp.status_code, 400, payload)
        self.assertEqual(self.client.get("/api/user-settings").json()["theme"], "light")

    def test_get_without_settings_is_404(self) -> None:
        owner = self.app.state.demo_user_id
        self.store._settings.records.clear()
        self.store._settings_by_owner.pop(owner)
        self.assertEqual(self.client.get("/api/user-settings").status_code, 404)
        resp = self.client.put("/api/user-settings", json={"reminders_enabled": False})
        self.assertEqual(resp.status_code, 200)
        self.assertFalse(resp.json()["reminders_enabled"])
        self.assertEqual(resp.json()["theme"], "light")


class TestAppWiring(unittest.TestCase):
    def test_health_and_me(self) -> None:
        app = create_app(store=RecordStore())
        with TestClient(app) as client:
            self.assertEqual(client.get("/api/health").json(), {"ok": True})
            me = client.get("/api/auth/me").json()
            self.assertEqual(me["handle"], "demo")
            self.assertNotIn("secret", me)

    def test_apps_are_isolated(self) -> None:
        a = TestClient(create_app(store=RecordStore()))
        b = TestClient(create_app(store=RecordStore()))
        a.post(
            "/api/glucose-readings",
            json={"level": 6.0, "measured_at": "2024-03-01T08:00:00Z", "measurement_type": "other"},
        )
        self.assertEqual(len(a.get("/api/glucose-readings").json()), 1)
        self.assertEqual(b.get("/api/glucose-readings").json(), [])
        a.close()
        b.close()

    def test_shared_store_seeds_demo_once(self) -> None:
        store = RecordStore()
        first = create_app(store=store)
        second = create_app(store=store)
        self.assertEqual(first.state.demo_user_id, second.state.demo_user_id)
        self.assertEqual(store.counts()["users"], 1)
        self.assertEqual(store.counts()["user_settings"], 1)

    def test_unexpected_errors_are_500(self) -> None:
        store = RecordStore()
        app = create_app(store=store)

        def boom(*args, **kwargs):
            raise RuntimeError("kaboom")

        store.list_medicines = boom  # type: ignore[method-assign]
        client = TestClient(app, raise_server_exceptions=False)
        resp = client.get("/api/medicines")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"detail": "Internal server error"})
        client.close()

    def test_custom_config(self) -> None:
        config = Settings()
        config.demo_handle = "rahim"
        config.demo_secret = "s3cret"
        store = RecordStore()
        app = create_app(store=store, config=config)
        user = store.get_user(app.state.demo_user_id)
        self.assertEqual(user.handle, "rahim")
        self.assertTrue(verify_password("s3cret", user.secret))


class TestSecrets(unittest.TestCase):
    def test_hash_round_trip(self) -> None:
        hashed = hash_password("demo")
        self.assertNotEqual(hashed, "demo")
        self.assertTrue(verify_password("demo", hashed))
        self.assertFalse(verify_password("wrong", hashed))
        self.assertFalse(verify_password("demo", "not-a-hash"))

    def test_malformed_hash_does_not_raise(self) -> None:
        for stored in ("pbkdf2_$1$aa$bb", "pbkdf2_sha256$0$aa$bb", "pbkdf2_nope$1000$aa$bb", "pbkdf2_sha256$x$aa$bb"):
            self.assertFalse(verify_password("demo", stored), stored)

    def test_ensure_demo_user_reuses_existing(self) -> None:
        store = RecordStore()
        first = ensure_demo_user(store, handle="demo", secret="demo")
        again = ensure_demo_user(store, handle="demo", secret="changed")
        self.assertEqual(first.id, again.id)


class TestTargetRange(unittest.TestCase):
    def test_parse(self) -> None:
        self.assertEqual(parse_target_range("4.0-7.0"), (4.0, 7.0))
        self.assertEqual(parse_target_range(" 4 - 8.5 "), (4.0, 8.5))
        self.assertIsNone(parse_target_range("7-4"))
        self.assertIsNone(parse_target_range("low-high"))
        self.assertIsNone(parse_target_range(""))


if __name__ == "__main__":
    unittest.main()
